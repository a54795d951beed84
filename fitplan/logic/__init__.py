"""Core business logic layer.

Subpackages:
- parsing: turning LLM plan text into DailyPlan values
- prompting: building the plan generation prompt
"""
__all__ = ["parsing", "prompting"]

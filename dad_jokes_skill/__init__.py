"""Reddit Dad Jokes voice skill backend."""

DAD_JOKES_SKILL_VERSION = "1.0.0"

__all__ = ["DAD_JOKES_SKILL_VERSION"]

"""AWS Lambda entry point for the skill.

The service container is built once per warm runtime and registered for
reuse. Configure the function handler as
``dad_jokes_skill.lambda_function.handler``.
"""

from __future__ import annotations

from dad_jokes_skill.bootstrap import build_default_service_container
from dad_jokes_skill.services import runtime
from dad_jokes_skill.services.skill import build_skill_builder

sb = build_skill_builder(runtime.get_or_create_services(build_default_service_container))

handler = sb.lambda_handler()


__all__ = ["handler", "sb"]

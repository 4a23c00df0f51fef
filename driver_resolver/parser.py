from typing import List

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .errors import MalformedOutputError
from .models import LogEntry, ManagerOutput


class _ResultPayload(BaseModel):
    message: str


class _LogPayload(BaseModel):
    level: str
    message: str


class _ManagerPayload(BaseModel):
    result: _ResultPayload
    logs: List[_LogPayload]


class ResultParser:
    """Parses the helper's ``--output json`` response."""

    def parse(self, stdout: str, command: str = "") -> ManagerOutput:
        try:
            payload = _ManagerPayload.model_validate_json(stdout or "")
        except PydanticValidationError as e:
            raise MalformedOutputError(
                f"Unsuccessful command executed: {command}" if command else "Malformed helper output",
                command=command,
                detail=_describe(e),
            ) from e

        return ManagerOutput(
            result_message=payload.result.message,
            logs=[LogEntry(level=log.level, message=log.message) for log in payload.logs],
        )


def _describe(error: PydanticValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        problems.append(f"{location}: {item.get('msg', 'invalid')}")
    return "; ".join(problems)

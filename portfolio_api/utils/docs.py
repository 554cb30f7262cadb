from typing import Any, Type

from pydantic import ConfigDict

from ..exceptions.api_exception import APIException


def example(**kwargs: Any) -> ConfigDict:
    return ConfigDict(json_schema_extra={"example": kwargs}, populate_by_name=True)


def responses(default: type, *args: Type[APIException]) -> dict[int | str, dict[str, Any]]:
    exceptions: dict[int, list[Type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    return {
        200: {"model": default},
        **{
            code: {
                "description": " / ".join(exc.description for exc in excs),
                "content": {
                    "application/json": {
                        "examples": {
                            exc.__name__: {
                                "summary": exc.detail,
                                "value": {"error": exc.detail, "message": exc.description},
                            }
                            for exc in excs
                        }
                    }
                },
            }
            for code, excs in exceptions.items()
        },
    }

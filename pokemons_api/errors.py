"""Error taxonomy of the API and its mapping onto JSON responses."""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class PokemonAPIError(Exception):
    status_code = 500

    def __init__(self, message: str, error: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class StoreOperationFailed(PokemonAPIError):
    """A query against the store raised; ``error`` is the driver exception."""

    status_code = 500

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "error": describe_error(self.error)}


class PokemonNotFound(PokemonAPIError):
    status_code = 404

    def __init__(self, message: str = "Pokemon not found."):
        super().__init__(message)


class InvalidPokemonPayload(PokemonAPIError):
    """A request body the store refuses to turn into a statement.

    Reported like any other failed store operation, under the operation's
    own message.
    """

    status_code = 500


def describe_error(exc: Optional[BaseException]) -> Dict[str, Any]:
    """Serialize a (possibly wrapped) driver exception for the response body."""
    if exc is None:
        return {}
    orig = getattr(exc, "orig", None) or exc
    payload: Dict[str, Any] = {"type": type(orig).__name__, "message": str(orig)}
    # MySQL drivers put the server errno first: (1054, "Unknown column ...")
    args = getattr(orig, "args", ())
    if args and isinstance(args[0], int):
        payload["code"] = args[0]
    if isinstance(orig, PokemonAPIError) and isinstance(orig.error, dict):
        payload.update(orig.error)
    statement = getattr(exc, "statement", None)
    if statement:
        payload["statement"] = statement
    return payload


async def pokemon_api_error_handler(request: Request, exc: PokemonAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PokemonAPIError, pokemon_api_error_handler)

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class ProductRequest:
    """
    Transport-neutral view of an incoming request.

    Attributes:
        body: Raw, undecoded request body (None when the request has none)
        path_parameters: Path parameters extracted by the router
    """
    body: Optional[Union[str, bytes]] = None
    path_parameters: Optional[Dict[str, str]] = None

    @property
    def product_id(self) -> Optional[str]:
        return (self.path_parameters or {}).get("id")

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ProductRequest":
        """Build a request from an API Gateway proxy event."""
        return cls(body=event.get("body"), path_parameters=event.get("pathParameters"))


@dataclass(frozen=True)
class HandlerResponse:
    """Outgoing response: status, headers and an already-serialized JSON body."""
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )

    def to_event(self) -> Dict[str, Any]:
        """Render as an API Gateway proxy response."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }

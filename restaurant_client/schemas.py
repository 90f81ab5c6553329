"""
Request Descriptors and Payload Schemas

RequestOptions describes a single outbound call. It is built fresh per call
and never retained. Multipart marks a body that must be sent as form data
(file uploads) instead of JSON.

Pydantic models here are optional conveniences: any resource method that
takes a body accepts either a plain dict or one of these models.

Author: Khalil Bannouri
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field


HttpMethod = str
QueryParams = Union[Mapping[str, Any], Sequence[Tuple[str, Any]]]


# =============================================================================
# REQUEST DESCRIPTORS
# =============================================================================

@dataclass
class Multipart:
    """
    Binary form payload, e.g. an avatar upload.

    Attributes:
        files: Field name -> file content. Values may be bytes, a file
            object, or a ``(filename, content, content_type)`` tuple.
        data: Plain form fields sent alongside the files
    """
    files: dict = field(default_factory=dict)
    data: dict = field(default_factory=dict)

    @classmethod
    def single(cls, name: str, content: Any) -> "Multipart":
        """Payload carrying one file under ``name``."""
        return cls(files={name: content})


@dataclass
class RequestOptions:
    """
    Per-call request configuration.

    Attributes:
        method: HTTP verb
        body: JSON-serializable value, pydantic model, or Multipart
        params: Query parameters; a sequence of pairs keeps repeated keys
        headers: Header overrides merged over the defaults
        extensions: Pass-through transport options (``timeout``,
            ``follow_redirects``, ``cookies``)
    """
    method: HttpMethod = "GET"
    body: Any = None
    params: Optional[QueryParams] = None
    headers: dict = field(default_factory=dict)
    extensions: dict = field(default_factory=dict)

    def __post_init__(self):
        self.method = self.method.upper()

    @property
    def is_multipart(self) -> bool:
        return isinstance(self.body, Multipart)


# =============================================================================
# PAYLOAD SCHEMAS
# =============================================================================

class LoginRequest(BaseModel):
    """Credentials for /auth/login."""
    email: str = Field(..., min_length=3, examples=["manager@restaurant.com"])
    password: str = Field(..., min_length=1)


class TokenPayload(BaseModel):
    """
    Login/registration response.

    Backends name the credential either ``token`` or ``access_token``.
    """
    model_config = {"extra": "allow"}

    token: Optional[str] = None
    access_token: Optional[str] = None
    message: Optional[str] = None

    @property
    def credential(self) -> Optional[str]:
        return self.token or self.access_token

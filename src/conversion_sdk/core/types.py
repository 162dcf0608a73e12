"""Core type definitions for the Conversion SDK."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, field_validator

ZERO_ADDRESS = "0x" + "0" * 40


def validate_token(value: Any) -> str:
    """Reject token identifiers that can never name a token."""
    if not isinstance(value, str) or not value:
        raise ValueError(f'Token must be a non-empty string: {value!r}')
    if value.lower() == ZERO_ADDRESS:
        raise ValueError(f'Token must not be the zero address: {value}')
    return value


class TokenRole(str, Enum):
    """Role of a position in a conversion path."""
    TOKEN = "token"
    ANCHOR = "anchor"

    @classmethod
    def for_index(cls, index: int) -> 'TokenRole':
        """Paths start at a token and alternate token / anchor positions."""
        return cls.TOKEN if index % 2 == 0 else cls.ANCHOR


@dataclass(frozen=True)
class PathStep:
    """A path element tagged with the role it plays at its position."""
    token: str
    role: TokenRole


class FindPathParams(BaseModel):
    """Parameters for a conversion path query."""
    model_config = ConfigDict(frozen=True)

    source_token: str
    target_token: str

    @field_validator('source_token', 'target_token', mode='before')
    @classmethod
    def check_token(cls, v):
        return validate_token(v)


class ConversionPathResult(BaseModel):
    """Result of a conversion path query."""
    model_config = ConfigDict(frozen=True)

    source_token: str
    target_token: str
    anchor_token: str
    path: List[str]

    @property
    def found(self) -> bool:
        """True when a route between source and target exists."""
        return len(self.path) > 0

    @property
    def hop_count(self) -> int:
        """Number of conversions along the path."""
        return len(self.path) // 2


class RPCRequest(BaseModel):
    """JSON-RPC request structure."""
    jsonrpc: str = "2.0"
    id: Union[str, int] = 1
    method: str
    params: List[Any]


class RPCResponse(BaseModel):
    """JSON-RPC response structure."""
    jsonrpc: str
    id: Union[str, int]
    result: Optional[Any] = None
    error: Optional[Dict[str, Any]] = None

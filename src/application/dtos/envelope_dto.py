"""DTOs for the method-dispatch envelope."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class DispatchRequestDTO(BaseModel):
    """A method call received from any transport."""

    method: Optional[str] = Field(default=None, description="Method name")
    params: Dict[str, Any] = Field(
        default_factory=dict, description="Method parameters"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"method": "list_devices", "params": {"room": "Kitchen"}}
        }
    }


class EnvelopeDTO(BaseModel):
    """Uniform result of every dispatched call."""

    ok: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> "EnvelopeDTO":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str, message: Optional[str] = None) -> "EnvelopeDTO":
        return cls(ok=False, error=error, message=message)

    def to_payload(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        payload: Dict[str, Any] = {"ok": False, "error": self.error}
        if self.message is not None:
            payload["message"] = self.message
        return payload

"""Request context consumed by partition key generators.

Mirrors the handful of request-envelope fields that can identify a record:

    context.System.user.userId
    context.System.device.deviceId
    context.System.person.personId
    request.locale
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class User:
    user_id: Optional[str] = None


@dataclass(frozen=True)
class Device:
    device_id: Optional[str] = None


@dataclass(frozen=True)
class Person:
    person_id: Optional[str] = None


@dataclass(frozen=True)
class SystemState:
    """The System section of the request context."""
    user: Optional[User] = field(default_factory=User)
    device: Optional[Device] = field(default_factory=Device)
    person: Optional[Person] = field(default_factory=Person)


@dataclass(frozen=True)
class Request:
    locale: Optional[str] = None


@dataclass(frozen=True)
class RequestContext:
    """Read-only view of an incoming request, as far as persistence cares."""
    system: SystemState = field(default_factory=SystemState)
    request: Optional[Request] = field(default_factory=Request)

    @property
    def user_id(self) -> Optional[str]:
        return self.system.user.user_id if self.system.user else None

    @property
    def device_id(self) -> Optional[str]:
        return self.system.device.device_id if self.system.device else None

    @property
    def person_id(self) -> Optional[str]:
        return self.system.person.person_id if self.system.person else None

    @property
    def locale(self) -> Optional[str]:
        return self.request.locale if self.request else None

    @classmethod
    def from_envelope(cls, envelope: Dict[str, Any]) -> "RequestContext":
        """Create from a raw (camelCase) request envelope dict.

        Missing sections produce None fields rather than errors; the
        generators decide what is required.
        """
        envelope = envelope or {}
        system = (envelope.get("context") or {}).get("System") or {}
        user = system.get("user")
        device = system.get("device")
        person = system.get("person")
        request = envelope.get("request")

        return cls(
            system=SystemState(
                user=User(user_id=user.get("userId")) if user else None,
                device=Device(device_id=device.get("deviceId")) if device else None,
                person=Person(person_id=person.get("personId")) if person else None,
            ),
            request=Request(locale=request.get("locale")) if request else None,
        )

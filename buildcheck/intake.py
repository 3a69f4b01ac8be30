# intake.py

import time
from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------
# Intent enumeration
# -----------------------
BUY_LAND = "buy_land"
START_BUILDING = "start_building"
ALREADY_BUILDING = "already_building"
RISK_CHECK = "risk_check"

INTENTS = (BUY_LAND, START_BUILDING, ALREADY_BUILDING, RISK_CHECK)

INTENT_LABELS = {
    BUY_LAND: "Buying land",
    START_BUILDING: "Starting construction",
    ALREADY_BUILDING: "Already building",
    RISK_CHECK: "Risk check only",
}

# Minimum trimmed lengths that count as "enough context"
MIN_ADDRESS_LEN = 5
MIN_LANDMARK_LEN = 2
MIN_MESSAGE_LEN = 15


def intent_label(intent: str) -> str:
    return INTENT_LABELS.get(intent, intent)


@dataclass(frozen=True)
class IntakeRecord:
    """
    One submission of the buildability intake form.

    Built once at submission time and never mutated afterwards.
    Only intent, address, landmark, lcda, coordinates and message
    feed the report; name and email are contact details.
    """

    intent: str = BUY_LAND
    name: str = ""
    email: str = ""
    address: str = ""
    area: str = ""
    landmark: str = ""
    lcda: str = ""
    coordinates: Optional[Tuple[float, float]] = None
    message: Optional[str] = None
    timestamp: int = 0

    def __post_init__(self):
        if self.intent not in INTENTS:
            raise ValueError(f"Unknown intent: {self.intent!r}")

    # -----------------------
    # Field helpers
    # -----------------------
    @property
    def has_address(self) -> bool:
        return len((self.address or "").strip()) >= MIN_ADDRESS_LEN

    @property
    def has_landmark(self) -> bool:
        return len((self.landmark or "").strip()) >= MIN_LANDMARK_LEN

    @property
    def has_message(self) -> bool:
        return len((self.message or "").strip()) >= MIN_MESSAGE_LEN

    @property
    def has_coordinates(self) -> bool:
        return self.coordinates is not None

    # -----------------------
    # Wire format
    # -----------------------
    def to_dict(self) -> dict:
        data = {
            "intent": self.intent,
            "name": self.name,
            "email": self.email,
            "address": self.address,
            "area": self.area,
            "landmark": self.landmark,
            "lcda": self.lcda,
            "message": self.message,
            "ts": self.timestamp,
        }
        if self.coordinates is not None:
            lat, lng = self.coordinates
            data["coords"] = {"lat": lat, "lng": lng}
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "IntakeRecord":
        """
        Rebuild a record from its stored JSON object.

        Raises ValueError / TypeError when the payload is not a record.
        """
        if not isinstance(data, dict):
            raise TypeError("Intake payload must be a JSON object")

        coords = data.get("coords")
        coordinates = None
        if coords:
            coordinates = (float(coords["lat"]), float(coords["lng"]))

        message = data.get("message")
        if message is not None:
            message = str(message)

        return cls(
            intent=data.get("intent") or BUY_LAND,
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            address=str(data.get("address") or ""),
            area=str(data.get("area") or ""),
            landmark=str(data.get("landmark") or ""),
            lcda=str(data.get("lcda") or ""),
            coordinates=coordinates,
            message=message,
            timestamp=int(data.get("ts") or 0),
        )


# -----------------------
# Form handling
# -----------------------
def validate_intake(form) -> list:
    """
    Gate for the "generate report" action.

    Returns a list of human-readable problems; an empty list means the
    form may be submitted. These never reach the scoring engine.
    """
    errors = []

    name = (form.get("name") or "").strip()
    email = form.get("email") or ""
    area = (form.get("area") or "").strip()
    lcda = (form.get("lcda") or "").strip()
    intent = form.get("intent") or BUY_LAND

    if len(name) < 2:
        errors.append("Please enter your full name.")

    if "@" not in email or "." not in email:
        errors.append("Please enter a valid email address.")

    if len(area) < 3:
        errors.append("Please enter the area or closest landmark.")

    if len(lcda) < 2:
        errors.append("Please enter the LCDA / LGA.")

    if intent not in INTENTS:
        errors.append("Please choose what you are planning to do.")

    return errors


def _parse_coordinates(form):
    lat = (form.get("lat") or "").strip()
    lng = (form.get("lng") or "").strip()

    if not lat or not lng:
        return None

    try:
        return float(lat), float(lng)
    except ValueError:
        # geolocation is best-effort; a bad value is the same as none
        return None


def record_from_form(form, now_ms: Optional[int] = None) -> IntakeRecord:
    """Build the immutable record from a submitted (already validated) form."""
    message = form.get("message")
    if message is not None and not message.strip():
        message = None

    if now_ms is None:
        now_ms = int(time.time() * 1000)

    return IntakeRecord(
        intent=form.get("intent") or BUY_LAND,
        name=(form.get("name") or "").strip(),
        email=(form.get("email") or "").strip(),
        address=form.get("address") or "",
        area=form.get("area") or "",
        landmark=form.get("landmark") or "",
        lcda=form.get("lcda") or "",
        coordinates=_parse_coordinates(form),
        message=message,
        timestamp=now_ms,
    )

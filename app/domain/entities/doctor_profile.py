from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Review:
    comment: str
    author: str | None = None
    rating: float | None = None


@dataclass(frozen=True)
class DoctorProfile:
    name: str
    education: str = ""
    contact: str = ""
    fee: float | int | str = 0
    rating: float = 0.0
    reviews: Tuple[Review, ...] = ()
    image: str | None = None
    biography: str = ""

    @property
    def review_count(self) -> int:
        return len(self.reviews)

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "DoctorProfile":
        """
        Build a profile from the hosting page's record.
        The biography arrives under "about-doctor"; "biography" is accepted too.
        """
        reviews = tuple(
            Review(
                comment=str(r.get("comment") or r.get("text") or "").strip(),
                author=(r.get("author") or r.get("name") or None),
                rating=r.get("rating"),
            )
            if isinstance(r, dict)
            else Review(comment=str(r).strip())
            for r in (payload.get("reviews") or [])
        )
        return DoctorProfile(
            name=(payload.get("name") or "").strip(),
            education=(payload.get("education") or "").strip(),
            contact=str(payload.get("contact") or "").strip(),
            fee=payload.get("fee", 0),
            rating=float(payload.get("rating") or 0.0),
            reviews=reviews,
            image=payload.get("image"),
            biography=(payload.get("about-doctor") or payload.get("biography") or "").strip(),
        )

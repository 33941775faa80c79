"""Conversion between nested domain entries and their JSON column form."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from domain.entities.post import Comment, Like
from domain.entities.profile import EducationEntry, ExperienceEntry


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def like_to_doc(like: Like) -> dict[str, Any]:
    return {"user": str(like.user_id)}


def like_from_doc(doc: dict[str, Any]) -> Like:
    return Like(user_id=UUID(doc["user"]))


def comment_to_doc(comment: Comment) -> dict[str, Any]:
    return {
        "id": str(comment.id),
        "user": str(comment.user_id),
        "text": comment.text,
        "name": comment.name,
        "avatar": comment.avatar_url,
        "date": comment.created_at.isoformat(),
    }


def comment_from_doc(doc: dict[str, Any]) -> Comment:
    return Comment(
        id=UUID(doc["id"]),
        user_id=UUID(doc["user"]),
        text=doc["text"],
        name=doc["name"],
        avatar_url=doc.get("avatar", ""),
        created_at=datetime.fromisoformat(doc["date"]),
    )


def experience_to_doc(entry: ExperienceEntry) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "title": entry.title,
        "company": entry.company,
        "location": entry.location,
        "from": entry.from_date.isoformat(),
        "to": entry.to_date.isoformat() if entry.to_date else None,
        "current": entry.current,
        "description": entry.description,
    }


def experience_from_doc(doc: dict[str, Any]) -> ExperienceEntry:
    return ExperienceEntry(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_or_none(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def education_to_doc(entry: EducationEntry) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "school": entry.school,
        "degree": entry.degree,
        "fieldofstudy": entry.field_of_study,
        "from": entry.from_date.isoformat(),
        "to": entry.to_date.isoformat() if entry.to_date else None,
        "current": entry.current,
        "description": entry.description,
    }


def education_from_doc(doc: dict[str, Any]) -> EducationEntry:
    return EducationEntry(
        id=UUID(doc["id"]),
        school=doc["school"],
        degree=doc["degree"],
        field_of_study=doc["fieldofstudy"],
        from_date=date.fromisoformat(doc["from"]),
        to_date=_date_or_none(doc.get("to")),
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )

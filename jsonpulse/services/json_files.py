"""Owner-scoped storage of JSON documents."""

import json
import logging
import math
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jsonpulse.config import get_settings
from jsonpulse.exceptions import ConflictError, InvalidFormatError, NotFoundError
from jsonpulse.models.json_file import JsonFile, file_name_key

logger = logging.getLogger(__name__)

settings = get_settings()


def _reject_constant(token: str) -> Any:
    """NaN and Infinity are not JSON."""
    raise InvalidFormatError("Invalid JSON format")


def _finite_float(token: str) -> float:
    """Parse a JSON number, rejecting ones that overflow to infinity."""
    value = float(token)
    if math.isinf(value):
        raise InvalidFormatError("Invalid JSON format")
    return value


def parse_json_content(content: str) -> Any:
    """Parse stored or submitted JSON text.

    Only strict JSON is accepted, so every stored document can be served
    back as a standard JSON response.

    Raises:
        InvalidFormatError: if the text is not valid JSON or nests too deeply.
    """
    try:
        return json.loads(content, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, TypeError):
        raise InvalidFormatError("Invalid JSON format") from None
    except RecursionError:
        raise InvalidFormatError("JSON nesting too deep") from None


class JsonFileService:
    """CRUD over one user's JSON files.

    Every query is filtered by ``user_id``; files of other users are
    invisible even when their names match.
    """

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _owned(self):
        return self.db.query(JsonFile).filter(JsonFile.user_id == self.user_id)

    def list_files(self) -> list[JsonFile]:
        """All files of the owner, newest first."""
        return self._owned().order_by(JsonFile.created_at.desc(), JsonFile.id.desc()).all()

    def find(self, file_name: str) -> JsonFile | None:
        """Exact (case-sensitive) name lookup."""
        return self._owned().filter(JsonFile.file_name == file_name).first()

    def get(self, file_name: str) -> JsonFile:
        file = self.find(file_name)
        if file is None:
            raise NotFoundError("File not found")
        return file

    def save(self, file_name: str, content: str) -> JsonFile:
        """Create the file or update it in place.

        An exact name match is updated, keeping its id, created_at and view
        count. A name that differs from an existing one only by case is
        rejected, so names stay unique per owner regardless of case.

        Raises:
            InvalidFormatError: missing fields, invalid JSON or oversized content.
            ConflictError: a file with the same name in a different case exists.
        """
        if not file_name or not content:
            raise InvalidFormatError("fileName and content are required")
        if len(content.encode("utf-8")) > settings.max_file_size_bytes:
            raise InvalidFormatError(
                f"File exceeds the maximum size of {settings.max_file_size_bytes} bytes"
            )
        parse_json_content(content)

        file = self.find(file_name)
        if file is not None:
            file.content = content
            file.touch()
            self.db.commit()
            self.db.refresh(file)
            logger.info(f"Updated file {file.id} for user {self.user_id}")
            return file

        clash = (
            self._owned()
            .filter(JsonFile.file_name_key == file_name_key(file_name))
            .first()
        )
        if clash is not None:
            raise ConflictError(f'A file named "{clash.file_name}" already exists')

        file = JsonFile(user_id=self.user_id, file_name=file_name, content=content, views=0)
        self.db.add(file)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f'A file named "{file_name}" already exists') from None
        self.db.refresh(file)
        logger.info(f"Created file {file.id} for user {self.user_id}")
        return file

    def delete(self, file_name: str) -> None:
        """Permanently remove a file."""
        file = self.get(file_name)
        file_id = file.id
        self.db.delete(file)
        self.db.commit()
        logger.info(f"Deleted file {file_id} for user {self.user_id}")

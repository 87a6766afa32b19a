"""JSON persistence for Pydantic models.

Used for the picker configuration. Reads turn pydantic and I/O failures into
ConfigurationError subclasses with recovery hints; writes keep a ``.bak`` of
the previous file and replace the target atomically.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from colorstate.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigWriteError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless load/save helpers for Pydantic models stored as JSON.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json_or_default(path, PickerConfig)
        PydanticPersistence.save_json(config.model_copy(update={"alpha_enabled": False}), path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read and validate a model from a JSON file.

        Raises:
            FileNotFoundError: If there is no file at path
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If the JSON does not fit the model
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} does not validate as {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Write a model to path as JSON.

        Args:
            data: Model to write
            path: Destination file
            indent: JSON indentation
            create_parents: Create missing parent directories
            backup: Copy an existing file to ``<name>.bak`` first

        Raises:
            ConfigWriteError: If the directory, backup or file cannot be written
        """
        # Write beside the target, then replace it in one step
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)

            if backup and path.exists():
                backup_path = path.with_suffix(path.suffix + ".bak")
                shutil.copy2(path, backup_path)
                logger.debug(f"Backed up {path} to {backup_path}")

            temp_path.write_text(data.model_dump_json(indent=indent), encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Cannot write {type(data).__name__} to {path}: {e}")
            raise ConfigWriteError(str(path), str(e)) from e
        finally:
            _discard(temp_path)

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """
        Like load_json, but a missing file yields a default model.

        The default is not written to disk. A file that exists but is broken
        still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[M]) -> tuple[bool, str | None]:
        """Check a JSON file against a model; returns (is_valid, error_message)."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
        return True, None


def _discard(path: Path) -> None:
    """Remove a leftover temp file without masking the error being raised."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")

"""
JSON Schema контракты magnitude_namer

Схемы лежат в schema/ рядом с модулем и ссылаются друг на друга по $id:
- magnitude_record.json — одна запись (MagnitudeRecord.model_dump())
- magnitude_batch.json — страница (BatchPage.to_dict()); records[] → $ref magnitude_record.json

Ссылки разрешаются через referencing.Registry, собранный из всех схем
каталога, без сетевых запросов.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource

_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение, meta-валидация и кэш схем одного каталога."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or _SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без .json.

        Raises:
            FileNotFoundError: Если файла нет
            ValueError: Если файл не является JSON Schema draft 2020-12
        """
        if schema_name not in self._schemas:
            path = self._schema_dir / f"{schema_name}.json"
            if not path.is_file():
                raise FileNotFoundError(f"Schema not found: {path}")
            schema = json.loads(path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e
            self._schemas[schema_name] = schema
        return self._schemas[schema_name]

    def registry(self) -> Registry:
        """Registry со всеми схемами каталога, ключ — $id схемы."""
        resources = []
        for path in sorted(self._schema_dir.glob("*.json")):
            schema = self.load_schema(path.stem)
            resources.append((schema["$id"], Resource.from_contents(schema)))
        return Registry().with_resources(resources)


# =============================================================================
# VALIDATOR
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной схемы каталога."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        loader = loader or SchemaLoader()
        self.schema_name = schema_name
        self._validator = Draft202012Validator(
            loader.load_schema(schema_name), registry=loader.registry()
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> ContractValidator:
    """Общий экземпляр ContractValidator для схемы пакета."""
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_magnitude_record(data: Dict[str, Any]) -> None:
    """MagnitudeRecord.model_dump() против magnitude_record.json."""
    contract_validator("magnitude_record").validate(data)


def validate_magnitude_batch(data: Dict[str, Any]) -> None:
    """BatchPage.to_dict() против magnitude_batch.json."""
    contract_validator("magnitude_batch").validate(data)

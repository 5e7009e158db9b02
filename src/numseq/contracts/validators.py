"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления последовательностей согласно
формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- float64s.json (массив float, null для не-конечных значений)
- ints.json (массив целых)
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
import jsonschema.validators
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем и устанавливаются
    вместе с пакетом как package data.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'float64s')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# TYPE CHECKERS
# =============================================================================


def _is_strict_integer(checker, instance: Any) -> bool:
    """
    integer без float: 1.0 не считается целым.

    Стандартный checker jsonschema принимает float с нулевой дробной
    частью, тогда как Ints хранит только int.
    """
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = jsonschema.validators.extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, validator_cls: Any = Draft202012Validator):
        """
        Args:
            schema_name: Имя схемы для валидации
            validator_cls: Класс jsonschema валидатора (draft 2020-12 по умолчанию)
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = validator_cls(self.schema)

    def validate(self, data: List[Any]) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Декодированный JSON (list)

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: List[Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: List[Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class Float64sValidator(ContractValidator):
    """Валидатор для float64s контракта (null допустим для NaN/Inf)."""

    def __init__(self):
        super().__init__("float64s")


class IntsValidator(ContractValidator):
    """
    Валидатор для ints контракта.

    Использует строгий integer checker: JSON литерал 1.0 нарушает контракт.
    """

    def __init__(self):
        super().__init__("ints", StrictIntegerValidator)

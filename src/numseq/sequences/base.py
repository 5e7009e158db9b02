"""
NumericSequence — базовая неизменяемая числовая последовательность

Все операции реализованы один раз для любого числового типа элементов;
конкретные типы (Float64s, Ints) задают только тип элемента, нулевое
значение и JSON-контракт.

Операции:
- Запросы: contains, first/last(_or), min, max, sum, average, are_sorted
- Преобразования: only, without, transform, sort, reverse
- Сериализация: json_string, from_json

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность никогда не изменяется после создания (tuple storage)
2. Каждая порождающая операция возвращает новую последовательность
3. Absent (None) и пустая последовательность неразличимы для вызывающего:
   равны, имеют одинаковый hash и кодируются как "[]"
4. Равенство структурное: конкретный тип + содержимое
"""

import json
import math
from typing import (
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    overload,
)

from pydantic import TypeAdapter

from src.numseq.contracts import ContractValidator
from src.numseq.logger import logger
from src.numseq.math.numerical_safeguards import (
    first_non_finite_index,
    is_valid_float,
    sequential_sum,
)
from src.numseq.sequences.config import (
    DEFAULT_ENCODING_CONFIG,
    EncodingConfig,
    NonFinitePolicy,
    SequenceEncodingError,
)

T = TypeVar("T", int, float)
S = TypeVar("S", bound="NumericSequence")


def _nan_last(value: Any) -> Tuple[bool, Any]:
    """Ключ сортировки: NaN после всех остальных значений."""
    return (value != value, value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r} is not allowed")


def _parse_finite_float(literal: str) -> float:
    """Литералы вне диапазона float (например 1e400) не превращаются в inf."""
    value = float(literal)
    if not is_valid_float(value):
        raise ValueError(f"JSON number {literal!r} is out of float range")
    return value


class NumericSequence(Generic[T]):
    """
    Неизменяемая упорядоченная последовательность чисел одного типа.

    Подклассы обязаны определить:
        _zero: нулевое значение типа (возвращается для пустой последовательности)
        _adapter: pydantic TypeAdapter для Tuple[T, ...]
        _contract: валидатор JSON Schema контракта
    """

    __slots__ = ("_values",)

    _zero: ClassVar[Any]
    _adapter: ClassVar[TypeAdapter]
    _contract: ClassVar[Type[ContractValidator]]
    # Значение, в которое декодируется JSON null (None = null запрещён контрактом)
    _null_item: ClassVar[Any] = None
    # Проверять ли NaN/Inf перед кодированием
    _check_finite: ClassVar[bool] = False

    def __init__(self, values: Optional[Iterable[T]] = None):
        """
        Args:
            values: Элементы последовательности. None создаёт absent
                последовательность, пустой iterable создаёт пустую.

        Raises:
            pydantic.ValidationError: Если элемент не соответствует типу
        """
        if values is None:
            self._values: Optional[Tuple[T, ...]] = None
        else:
            self._values = self._adapter.validate_python(tuple(values))

    @classmethod
    def _from_tuple(cls: type[S], values: Optional[Tuple[Any, ...]]) -> S:
        """Создание без повторной валидации (элементы уже проверены)."""
        seq = cls.__new__(cls)
        seq._values = values
        return seq

    def _items(self) -> Tuple[T, ...]:
        return self._values if self._values is not None else ()

    @property
    def is_absent(self) -> bool:
        """True если последовательность создана без backing storage."""
        return self._values is None

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __len__(self) -> int:
        return len(self._items())

    def __iter__(self) -> Iterator[T]:
        return iter(self._items())

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self: S, index: slice) -> S: ...

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return self._from_tuple(self._items()[index])
        return self._items()[index]

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._items() == other._items()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._items()))

    def __repr__(self) -> str:
        if self._values is None:
            return f"{type(self).__name__}(None)"
        return f"{type(self).__name__}({list(self._values)!r})"

    # =========================================================================
    # QUERIES
    # =========================================================================

    def contains(self, looking_for: T) -> bool:
        """
        Проверка наличия элемента (точное равенство, без epsilon).

        NaN не равен ничему, включая себя, поэтому contains(nan) всегда False.
        """
        for value in self._items():
            if value == looking_for:
                return True
        return False

    def first_or(self, default: T) -> T:
        """Первый элемент или default для пустой последовательности."""
        values = self._items()
        if not values:
            return default
        return values[0]

    def last_or(self, default: T) -> T:
        """Последний элемент или default для пустой последовательности."""
        values = self._items()
        if not values:
            return default
        return values[-1]

    def first(self) -> T:
        """
        Первый элемент или ноль. См. также first_or().

        Не отличает пустую последовательность от нулевого первого элемента.
        """
        return self.first_or(self._zero)

    def last(self) -> T:
        """Последний элемент или ноль. См. также last_or()."""
        return self.last_or(self._zero)

    def min(self) -> T:
        """
        Минимальное значение или ноль для пустой последовательности.

        Сравнения по IEEE: NaN на позиции 0 возвращается как минимум,
        NaN на остальных позициях никогда не выбирается.
        """
        values = self._items()
        if not values:
            return self._zero

        result = values[0]
        for value in values:
            if value < result:
                result = value
        return result

    def max(self) -> T:
        """Максимальное значение или ноль. NaN-поведение как у min()."""
        values = self._items()
        if not values:
            return self._zero

        result = values[0]
        for value in values:
            if value > result:
                result = value
        return result

    def sum(self) -> T:
        """Сумма элементов (последовательное накопление в порядке обхода)."""
        return sequential_sum(self._items(), self._zero)

    def average(self) -> float:
        """
        Среднее арифметическое: sum() / len().

        Returns:
            Среднее значение или 0.0 для пустой последовательности.
            Для int, чьё среднее не помещается во float, возвращается
            ±inf (как при переполнении суммы float).
        """
        count = len(self._items())
        if count == 0:
            return 0.0
        total = self.sum()
        try:
            return total / count
        except OverflowError:
            return math.inf if total > 0 else -math.inf

    def are_sorted(self) -> bool:
        """
        Проверка неубывающего порядка.

        Пара (a, b) нарушает порядок только если b < a. Пары с NaN
        порядок не нарушают, поэтому любой результат sort() отсортирован.
        """
        values = self._items()
        for earlier, later in zip(values, values[1:]):
            if later < earlier:
                return False
        return True

    # =========================================================================
    # TRANSFORMS
    # =========================================================================

    def only(self: S, condition: Callable[[T], bool]) -> S:
        """
        Новая последовательность из элементов, для которых condition истинно.

        Порядок сохраняется. Если ни один элемент не подошёл, результат
        absent. Противоположность without().
        """
        kept = tuple(value for value in self._items() if condition(value))
        return self._from_tuple(kept or None)

    def without(self: S, condition: Callable[[T], bool]) -> S:
        """
        Новая последовательность из элементов, для которых condition ложно.

        only(p) и without(p) вместе разбивают исходную последовательность.
        """
        kept = tuple(value for value in self._items() if not condition(value))
        return self._from_tuple(kept or None)

    def transform(self: S, fn: Callable[[T], T]) -> S:
        """
        Поэлементное преобразование; длина и порядок сохраняются.

        Absent вход даёт absent выход. Результаты fn проходят валидацию
        типа элемента.

        Raises:
            pydantic.ValidationError: Если fn вернул значение не того типа
        """
        if self._values is None:
            return self._from_tuple(None)
        return type(self)(fn(value) for value in self._values)

    def sort(self: S) -> S:
        """
        Новая последовательность в неубывающем порядке.

        Сортировка стабильная (равные элементы сохраняют взаимный порядок),
        NaN размещаются после всех остальных значений. Последовательность
        из 0 или 1 элемента возвращается без копирования.

        Для сортировки по убыванию: seq.sort().reverse()
        """
        values = self._items()
        if len(values) < 2:
            return self
        return self._from_tuple(tuple(sorted(values, key=_nan_last)))

    def reverse(self: S) -> S:
        """Новая последовательность в обратном порядке (0-1 элемент: self)."""
        values = self._items()
        if len(values) < 2:
            return self
        return self._from_tuple(values[::-1])

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def json_string(self, config: Optional[EncodingConfig] = None) -> str:
        """
        Компактный JSON массив: [v0,v1,...]

        Absent и пустая последовательности кодируются как "[]".

        Args:
            config: Политика кодирования (default: DEFAULT_ENCODING_CONFIG)

        Returns:
            JSON текст

        Raises:
            SequenceEncodingError: NaN/Inf при политике RAISE
        """
        config = config or DEFAULT_ENCODING_CONFIG
        values = self._items()

        if self._check_finite:
            index = first_non_finite_index(values)
            if index is not None:
                if config.non_finite is NonFinitePolicy.RAISE:
                    logger.debug(
                        "Rejecting %s JSON encoding: non-finite value at index %d",
                        type(self).__name__,
                        index,
                    )
                    raise SequenceEncodingError(index, values[index])
                logger.warning(
                    "Encoding non-finite %s values as null (first at index %d)",
                    type(self).__name__,
                    index,
                )

        return self._adapter.dump_json(values).decode("utf-8")

    @classmethod
    def from_json(cls: type[S], text: Union[str, bytes]) -> S:
        """
        Разбор JSON массива, созданного json_string().

        Данные проверяются JSON Schema контрактом типа. Для Float64s
        null декодируется в NaN.

        Raises:
            ValueError: Невалидный JSON, NaN/Infinity литералы или число
                вне диапазона float (1e400)
            jsonschema.ValidationError: Нарушение контракта
        """
        data = json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
        cls._contract().validate(data)
        return cls(cls._null_item if item is None else item for item in data)

"""
Tuple — Однородный 4-кортеж (x, y, z, w)

Immutable Pydantic модель, представляющая точку (w = 1) или вектор (w = 0)
в 3D пространстве, с покомпонентной арифметикой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство приближённое: |Δc| < EPS_TUPLE_COMPARE для каждой компоненты
2. is_point/is_vector сравнивают w ТОЧНО (1.0 / 0.0), без толерантности
3. Любой w допустим: point + point даёт w = 2.0 без ошибки
4. Деление на ноль даёт ±inf/NaN по IEEE-754, без исключения
5. Операции никогда не мутируют операнды
"""

from typing import Final, Iterable

from pydantic import BaseModel, Field

from raytracer.core.math.numerical_safeguards import (
    EPS_TUPLE_COMPARE,
    ieee_divide,
    is_valid_float,
    within_tolerance,
)

# =============================================================================
# ДИСКРИМИНАНТ W
# =============================================================================

W_POINT: Final[float] = 1.0
W_VECTOR: Final[float] = 0.0


def _is_scalar(value: object) -> bool:
    # bool — подкласс int, но скаляром не считается
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# TUPLE MODEL
# =============================================================================


class Tuple(BaseModel):
    """
    Однородный 4-кортеж двойной точности.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Равенство приближённое, поэтому экземпляры не хэшируются.
    """

    x: float = Field(..., description="Компонента X")
    y: float = Field(..., description="Компонента Y")
    z: float = Field(..., description="Компонента Z")
    w: float = Field(..., description="Дискриминант: 1.0 — точка, 0.0 — вектор")

    model_config = {"frozen": True}  # Immutable

    # Приближённое равенство не совместимо ни с каким хэшем
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, x: float, y: float, z: float, w: float) -> "Tuple":
        """Кортеж с компонентами как есть, без валидации w."""
        return cls(x=x, y=y, z=z, w=w)

    @classmethod
    def new_point(cls, x: float, y: float, z: float) -> "Tuple":
        """Точка: w = 1.0"""
        return cls(x=x, y=y, z=z, w=W_POINT)

    @classmethod
    def new_vector(cls, x: float, y: float, z: float) -> "Tuple":
        """Вектор: w = 0.0"""
        return cls(x=x, y=y, z=z, w=W_VECTOR)

    @classmethod
    def from_components(cls, values: Iterable[float]) -> "Tuple":
        """
        Создание кортежа из итерируемого набора ровно четырёх чисел.

        Args:
            values: (x, y, z, w) в любом итерируемом виде

        Returns:
            Новый Tuple

        Raises:
            ValueError: Если компонент не четыре
        """
        components = tuple(values)
        if len(components) != 4:
            raise ValueError(
                f"Tuple requires exactly 4 components, got {len(components)}"
            )
        x, y, z, w = components
        return cls(x=x, y=y, z=z, w=w)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        """
        Точка ли это.

        Сравнение точное (w == 1.0): кортеж с w = 0.999999 равен точке
        по ==, но точкой не является.
        """
        return self.w == W_POINT

    def is_vector(self) -> bool:
        """Вектор ли это (точное w == 0.0)."""
        return self.w == W_VECTOR

    def components(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def is_finite(self) -> bool:
        """Все компоненты конечны (нет NaN/Inf), т.е. кортеж представим в JSON."""
        return all(is_valid_float(c) for c in self.components())

    # -------------------------------------------------------------------------
    # Равенство
    # -------------------------------------------------------------------------

    def is_close(self, other: "Tuple", tol: float = EPS_TUPLE_COMPARE) -> bool:
        """
        Покомпонентное сравнение с абсолютной толерантностью.

        Args:
            other: Второй кортеж
            tol: Абсолютная толерантность (default: EPS_TUPLE_COMPARE)

        Returns:
            True если |Δc| < tol для всех четырёх компонент

        Raises:
            TypeError: Если other не Tuple
            ValueError: Если tol <= 0
        """
        if not isinstance(other, Tuple):
            raise TypeError(
                f"Can only compare Tuple with Tuple, got {type(other).__name__}"
            )
        return all(
            within_tolerance(a, b, tol)
            for a, b in zip(self.components(), other.components())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.is_close(other)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(
            x=self.x + other.x,
            y=self.y + other.y,
            z=self.z + other.z,
            w=self.w + other.w,
        )

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(
            x=self.x - other.x,
            y=self.y - other.y,
            z=self.z - other.z,
            w=self.w - other.w,
        )

    def __neg__(self) -> "Tuple":
        return Tuple(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(
            x=scalar * self.x,
            y=scalar * self.y,
            z=scalar * self.z,
            w=scalar * self.w,
        )

    def __rmul__(self, scalar: float) -> "Tuple":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple":
        """
        Деление на скаляр.

        Деление на ноль не бросает ZeroDivisionError: компоненты становятся
        ±inf или NaN, как в IEEE-754.
        """
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(
            x=ieee_divide(self.x, scalar),
            y=ieee_divide(self.y, scalar),
            z=ieee_divide(self.z, scalar),
            w=ieee_divide(self.w, scalar),
        )

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.is_point():
            return f"point({self.x}, {self.y}, {self.z})"
        if self.is_vector():
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"tuple({self.x}, {self.y}, {self.z}, {self.w})"

"""
Kubernetes 리소스 단위 변환 유틸리티
CPU와 메모리 문자열을 표준 단위(밀리코어, Mi)로 변환
"""
from decimal import Decimal, DecimalException, InvalidOperation
from enum import Enum
from typing import Optional, Union


class ResourceKind(str, Enum):
    """대시보드에서 다루는 리소스 종류"""
    CPU = "cpu"
    MEMORY = "memory"


class QuantityParseError(ValueError):
    """리소스 수량 문자열을 해석할 수 없을 때 발생"""

    def __init__(self, kind: str, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind} quantity: {value!r}")


MEBIBYTE = 1024 ** 2

# Kubernetes Quantity와 동일하게 int64 범위까지만 허용
MAX_QUANTITY = 2 ** 63 - 1

# suffix -> 밀리코어 배율
CPU_SUFFIXES = {
    "n": Decimal(1) / Decimal(1000000),
    "u": Decimal(1) / Decimal(1000),
    "m": Decimal(1),
}

# suffix -> 바이트 배율
MEMORY_SUFFIXES = {
    "Ki": Decimal(1024),
    "Mi": Decimal(1024 ** 2),
    "Gi": Decimal(1024 ** 3),
    "Ti": Decimal(1024 ** 4),
    "Pi": Decimal(1024 ** 5),
    "Ei": Decimal(1024 ** 6),
    "k": Decimal(1000),
    "K": Decimal(1000),
    "M": Decimal(1000 ** 2),
    "G": Decimal(1000 ** 3),
    "T": Decimal(1000 ** 4),
    "P": Decimal(1000 ** 5),
    "E": Decimal(1000 ** 6),
}

UNITS = {
    ResourceKind.CPU: "m",
    ResourceKind.MEMORY: "Mi",
}


def _to_decimal(kind: ResourceKind, raw: str, number: str) -> Decimal:
    try:
        value = Decimal(number)
    except InvalidOperation:
        raise QuantityParseError(kind.value, raw) from None
    if not value.is_finite() or value < 0 or value.adjusted() > 18:
        raise QuantityParseError(kind.value, raw)
    return value


def _scale(kind: ResourceKind, raw: str, number: str, multiplier: Decimal, divisor: int = 1) -> int:
    try:
        result = int(_to_decimal(kind, raw, number) * multiplier / divisor)
    except DecimalException:
        raise QuantityParseError(kind.value, raw) from None
    if result > MAX_QUANTITY:
        raise QuantityParseError(kind.value, raw)
    return result


def _split_suffix(value: str, suffixes) -> tuple:
    for suffix, multiplier in suffixes.items():
        if value.endswith(suffix):
            return value[:-len(suffix)], multiplier
    return value, None


def normalize(kind: Union[ResourceKind, str], quantity: Optional[str]) -> int:
    """리소스 수량 문자열을 정수 표준 단위로 변환

    - cpu: 밀리코어 ('500m' -> 500, '2' -> 2000, '250000000n' -> 250)
    - memory: Mi ('128Mi' -> 128, '1Gi' -> 1024, '1G' -> 953, '1048576' -> 1)

    최종 값은 정수로 절삭됩니다.

    Args:
        kind: 'cpu' 또는 'memory'
        quantity: Kubernetes 리소스 수량 문자열

    Returns:
        int: 밀리코어 또는 Mi 단위 값

    Raises:
        QuantityParseError: 비어 있거나 해석할 수 없는 수량, int64 범위를 넘는 수량
        ValueError: 지원하지 않는 리소스 종류
    """
    kind = ResourceKind(kind)

    if quantity is None:
        raise QuantityParseError(kind.value, quantity)
    raw = str(quantity).strip()
    if not raw:
        raise QuantityParseError(kind.value, quantity)

    if kind is ResourceKind.CPU:
        number, multiplier = _split_suffix(raw, CPU_SUFFIXES)
        if multiplier is None:
            multiplier = Decimal(1000)
        return _scale(kind, raw, number, multiplier)

    number, multiplier = _split_suffix(raw, MEMORY_SUFFIXES)
    if multiplier is None:
        multiplier = Decimal(1)
    return _scale(kind, raw, number, multiplier, MEBIBYTE)


def parse_cpu(cpu_str: Optional[str]) -> int:
    """CPU 문자열을 밀리코어로 변환"""
    return normalize(ResourceKind.CPU, cpu_str)


def parse_memory(mem_str: Optional[str]) -> int:
    """메모리 문자열을 Mi로 변환"""
    return normalize(ResourceKind.MEMORY, mem_str)


def format_quantity(kind: Union[ResourceKind, str], value: int) -> str:
    """표준 단위 값에 단위 접미사를 붙임 (500 -> '500m', 128 -> '128Mi')"""
    return f"{value}{UNITS[ResourceKind(kind)]}"


__all__ = [
    "ResourceKind",
    "QuantityParseError",
    "normalize",
    "parse_cpu",
    "parse_memory",
    "format_quantity",
]

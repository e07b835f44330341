from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from functools import lru_cache

from py_ecc.fields import optimized_bn128_FQ, optimized_bls12_381_FQ
from py_ecc.fields.field_elements import FQ

from .constant import BN254_SCALAR_FIELD, BLS12_381_SCALAR_FIELD

_RING_METHODS = ("__add__", "__mul__")


def _has_methods(C, methods):
    mro = C.__mro__
    for method in methods:
        for B in mro:
            if method in B.__dict__:
                if B.__dict__[method] is None:
                    return False
                break
        else:
            return False
    return True


class Ring(ABC):
    """
    Values that can flow through circuit wires.

    A ring value must support `+`, `*` and `==`, and be safe to duplicate
    with `copy.copy`. Any class defining `+` and `*` is a virtual subclass,
    so `int` or `py_ecc` field elements work as is. Sequences (`list`,
    `tuple`, `str`, ...) are not rings: for them `+` and `*` concatenate.
    """

    @abstractmethod
    def __add__(self, other):
        raise NotImplementedError()

    @abstractmethod
    def __mul__(self, other):
        raise NotImplementedError()

    @abstractmethod
    def __eq__(self, other):
        raise NotImplementedError()

    @classmethod
    def __subclasshook__(cls, C):
        if cls is Ring:
            if issubclass(C, Sequence):
                return False
            if _has_methods(C, _RING_METHODS):
                return True
        return NotImplemented


class FieldType(Enum):
    BN128 = optimized_bn128_FQ
    BN254 = optimized_bn128_FQ
    ALT_BN128 = optimized_bn128_FQ
    BLS12_381 = optimized_bls12_381_FQ


class FieldOrder(Enum):
    BN128 = BN254_SCALAR_FIELD
    BN254 = BN254_SCALAR_FIELD
    ALT_BN128 = BN254_SCALAR_FIELD
    BLS12_381 = BLS12_381_SCALAR_FIELD


@lru_cache(maxsize=None)
def prime_field(modulus: int):
    """
    Get the field element class of `GF(modulus)`.

    The returned class is a `py_ecc` FQ, so `prime_field(7)(5) + 3 == 1`.
    """
    modulus = int(modulus)
    if modulus < 2:
        raise ValueError(f"Invalid field modulus: {modulus}")

    return type(f"FQ{modulus}", (FQ,), {"field_modulus": modulus})


def base_field(curve: str):
    """Get the base field element class of the curve"""
    return FieldType[curve].value


def scalar_field(curve: str):
    """Get the field element class over the curve order"""
    return prime_field(FieldOrder[curve].value)

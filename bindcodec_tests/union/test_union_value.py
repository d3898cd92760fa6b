from dataclasses import FrozenInstanceError

import pytest

from bindcodec.exception import CodecTypeError
from bindcodec.union import UnionTypeDescriptor, VariantDescriptor, union_value
from bindcodec.union.value import (
    get_accessors,
    get_payload_type,
    get_union_descriptor,
    is_union_value,
    resolve_accessor,
)


@union_value
class Port:
    number: int | None = None
    service_name: str | None = None


def test_exactly_one_variant() -> None:
    assert Port(number=80).number == 80
    assert Port(service_name='http').service_name == 'http'
    # a falsy payload is still a payload
    assert Port(number=0).number == 0
    with pytest.raises(ValueError):
        Port()
    with pytest.raises(ValueError):
        Port(number=80, service_name='http')


def test_frozen() -> None:
    port = Port(number=80)
    with pytest.raises(FrozenInstanceError):
        port.number = 81  # type: ignore[misc]


def test_is_union_value() -> None:
    assert is_union_value(Port)
    assert not is_union_value(Port(number=1))
    assert not is_union_value(int)


def test_default_descriptor() -> None:
    descriptor = get_union_descriptor(Port)
    assert descriptor == UnionTypeDescriptor.of('Port', 'number', 'service_name')
    assert list(descriptor) == [VariantDescriptor('number'), VariantDescriptor('service_name')]
    assert len(descriptor) == 2


def test_accessors() -> None:
    accessors = get_accessors(Port)
    assert list(accessors) == ['number', 'service_name']
    number = accessors['number']
    assert number.attr == 'number'
    assert number.extract(Port(number=1)) == 1
    assert number.extract(Port(service_name='x')) is None
    assert number.wrap(2) == Port(number=2)
    with pytest.raises(TypeError):
        accessors['other'] = number  # type: ignore[index]


@pytest.mark.parametrize('identifier', ['service_name', 'service-name', 'ServiceName', 'serviceName', 'SERVICE_NAME'])
def test_resolve_accessor(identifier: str) -> None:
    accessor = resolve_accessor(Port, identifier)
    assert accessor is not None
    assert accessor.attr == 'service_name'


def test_resolve_missing_accessor() -> None:
    assert resolve_accessor(Port, 'protocol') is None


def test_not_a_union_value() -> None:
    with pytest.raises(CodecTypeError):
        get_accessors(int)
    with pytest.raises(CodecTypeError):
        get_union_descriptor(int)


def test_payload_type() -> None:
    accessors = get_accessors(Port)
    assert get_payload_type(Port, accessors['number']) is int
    assert get_payload_type(Port, accessors['service_name']) is str


def test_variant_must_default_to_none() -> None:
    with pytest.raises(CodecTypeError):
        @union_value
        class Invalid:
            number: int | None = 0


def test_variant_names_must_not_clash() -> None:
    with pytest.raises(CodecTypeError):
        @union_value
        class Invalid:
            ip_address: str | None = None
            ipAddress: str | None = None


def test_needs_a_variant() -> None:
    with pytest.raises(CodecTypeError):
        @union_value
        class Invalid:
            pass


def test_no_post_init() -> None:
    with pytest.raises(CodecTypeError):
        @union_value
        class Invalid:
            number: int | None = None

            def __post_init__(self) -> None:
                pass

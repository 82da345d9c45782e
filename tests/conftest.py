import pytest

import warren

FORMATS = ['msgpack', 'json', 'term']


@pytest.fixture(params=FORMATS)
def fmt(request):
    return request.param


@pytest.fixture
def document():
    return {
        'name': 'order',
        'items': [1, 2, 3],
        'nested': {'ok': True, 'missing': None},
        'ratio': 0.5,
    }


@pytest.fixture
def make_message():
    def make(payload=b'', **props):
        return warren.Message(warren.build_properties(props), payload)

    return make

from __future__ import annotations

import re

from quicklog.ids import RandomIdGenerator, generate_id

HEX16 = re.compile(r"^[0-9a-f]{16}$")


def test_generate_id_is_16_lowercase_hex_chars() -> None:
    for _ in range(100):
        assert HEX16.match(generate_id())


def test_generate_id_does_not_collide_over_10k_draws() -> None:
    ids = {generate_id() for _ in range(10_000)}
    assert len(ids) == 10_000


def test_seeded_generators_are_reproducible() -> None:
    a = RandomIdGenerator(seed=7)
    b = RandomIdGenerator(seed=7)
    assert [a() for _ in range(5)] == [b() for _ in range(5)]


def test_ids_keep_leading_zeros() -> None:
    class ZeroRandom(RandomIdGenerator):
        def __init__(self) -> None:
            super().__init__(seed=0)
            self._rng.getrandbits = lambda bits: 0xAB

    assert ZeroRandom()() == "00000000000000ab"

from __future__ import annotations

import jax


def _host_int_value(value) -> int:
    return int(jax.device_get(value))


def _host_bool_value(value) -> bool:
    return bool(jax.device_get(value))


def _host_list(value) -> list:
    # SYNC: pulls a whole device array back for host-side decoding.
    return jax.device_get(value).tolist()


__all__ = [
    "_host_int_value",
    "_host_bool_value",
    "_host_list",
]

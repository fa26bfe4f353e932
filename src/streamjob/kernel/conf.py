from __future__ import annotations

import os
from collections.abc import Mapping


def normalize_key(key: str) -> str:
    # Hadoop Streaming exports job configuration lowercased with dots replaced by underscores.
    return key.lower().replace(".", "_")


def from_environ(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Harvest job configuration from the process environment.

    Hadoop Streaming passes the job configuration to each task as environment
    variables with lowercase names (``mapreduce_job_name`` and so on), so only
    names that are already lowercase are kept. This also drops the usual shell
    noise like ``HOME`` or ``PATH``. Anything else that happens to be lowercase
    will slip through, so callers should validate values they depend on.

    The mapping is copied; writing to the result never touches the environment.
    """
    source = os.environ if environ is None else environ
    return {normalize_key(key): value for key, value in source.items() if key == key.lower()}

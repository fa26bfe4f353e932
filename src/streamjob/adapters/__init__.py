from .contracts import AdapterLookupError, AdapterMeta, adapter, get_adapter_meta, resolve_adapter
from .stdio import STDERR, STDOUT, StdioSink, sink_stderr, sink_stdout

# Relay lives in streamjob.adapters.relay and is imported from there to keep kernel imports light.
__all__ = [
    "adapter",
    "AdapterMeta",
    "AdapterLookupError",
    "get_adapter_meta",
    "resolve_adapter",
    "StdioSink",
    "STDOUT",
    "STDERR",
    "sink_stdout",
    "sink_stderr",
]

from txbench.loader.base_loader import BaseLoader, scaled_record_count
from txbench.loader.loader_registry import LoaderRegistry
from txbench.loader.ycsb_loader import YcsbLoader

__all__ = ["BaseLoader", "LoaderRegistry", "YcsbLoader", "scaled_record_count"]

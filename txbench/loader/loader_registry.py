from txbench.loader.ycsb_loader import YcsbLoader
from txbench.types import LoaderType
from txbench.utils.base_registry import BaseRegistry


class LoaderRegistry(BaseRegistry):
    @classmethod
    def get_key_from_str(cls, key_str: str) -> LoaderType:
        return LoaderType.from_str(key_str)


LoaderRegistry.register(LoaderType.YCSB, YcsbLoader)

import json
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from txbench.config.base_poly_config import BasePolyConfig
from txbench.config.flat_dataclass import create_flat_dataclass
from txbench.config.utils import dataclass_to_dict
from txbench.exceptions import ConfigurationError
from txbench.logger import init_logger
from txbench.types import DistributionType, LoaderType, SinkType

logger = init_logger(__name__)


@dataclass
class BaseDistributionConfig(BasePolyConfig):
    pass


@dataclass
class UniformDistributionConfig(BaseDistributionConfig):

    @staticmethod
    def get_type():
        return DistributionType.UNIFORM


@dataclass
class ZipfianDistributionConfig(BaseDistributionConfig):
    theta: float = field(
        default=0.99,
        metadata={"help": "Skew exponent for the Zipfian distribution."},
    )

    def __post_init__(self):
        if self.theta < 0:
            raise ConfigurationError(f"theta must be >= 0, got {self.theta}")

    @staticmethod
    def get_type():
        return DistributionType.ZIPFIAN


@dataclass
class ScrambledZipfianDistributionConfig(ZipfianDistributionConfig):

    @staticmethod
    def get_type():
        return DistributionType.SCRAMBLED_ZIPFIAN


@dataclass
class FocusedZipfianDistributionConfig(ZipfianDistributionConfig):
    num: int = field(
        default=0,
        metadata={"help": "Index of the key space slice holding the hotspot."},
    )
    denom: int = field(
        default=1,
        metadata={"help": "Number of slices the key space is divided into."},
    )

    def __post_init__(self):
        super().__post_init__()
        if self.denom < 1 or not 0 <= self.num < self.denom:
            raise ConfigurationError(
                f"Focused center {self.num}/{self.denom} must satisfy 0 <= num < denom"
            )

    @staticmethod
    def get_type():
        return DistributionType.FOCUSED_ZIPFIAN


@dataclass
class SequentialDistributionConfig(BaseDistributionConfig):

    @staticmethod
    def get_type():
        return DistributionType.SEQUENTIAL


@dataclass
class BaseLoaderConfig(BasePolyConfig):
    scale_factor: float = field(
        default=1.0,
        metadata={"help": "Multiplier applied to the base record count."},
    )
    commit_batch_size: int = field(
        default=1000,
        metadata={"help": "Rows per batch; each batch is committed on its own."},
    )
    show_progress: bool = field(
        default=False,
        metadata={"help": "Show a progress bar while loading."},
    )

    def __post_init__(self):
        if self.scale_factor <= 0:
            raise ConfigurationError(
                f"scale_factor must be positive, got {self.scale_factor}"
            )
        if self.commit_batch_size < 1:
            raise ConfigurationError(
                f"commit_batch_size must be >= 1, got {self.commit_batch_size}"
            )


@dataclass
class YcsbLoaderConfig(BaseLoaderConfig):
    table_name: str = field(
        default="usertable",
        metadata={"help": "Table populated by the YCSB loader."},
    )
    base_record_count: int = field(
        default=1000,
        metadata={"help": "Records loaded at scale factor 1."},
    )
    field_count: int = field(
        default=10,
        metadata={"help": "Number of text fields per record."},
    )
    field_length: int = field(
        default=100,
        metadata={"help": "Length of each text field."},
    )
    key_distribution_config: BaseDistributionConfig = field(
        default_factory=SequentialDistributionConfig,
        metadata={"help": "Distribution the record keys are drawn from."},
    )

    def __post_init__(self):
        super().__post_init__()
        if self.base_record_count < 0:
            raise ConfigurationError(
                f"base_record_count must be >= 0, got {self.base_record_count}"
            )
        if self.field_count < 0 or self.field_length < 0:
            raise ConfigurationError(
                f"Invalid field layout {self.field_count} x {self.field_length}"
            )

    @property
    def field_names(self) -> List[str]:
        return [f"field{i}" for i in range(1, self.field_count + 1)]

    @staticmethod
    def get_type():
        return LoaderType.YCSB


@dataclass
class BaseSinkConfig(BasePolyConfig):
    pass


@dataclass
class InMemorySinkConfig(BaseSinkConfig):

    @staticmethod
    def get_type():
        return SinkType.IN_MEMORY


@dataclass
class SqliteSinkConfig(BaseSinkConfig):
    database_path: str = field(
        default="txbench.db",
        metadata={"help": "Path of the sqlite3 database file."},
    )
    create_tables: bool = field(
        default=True,
        metadata={"help": "Create missing catalog tables on connect."},
    )

    @staticmethod
    def get_type():
        return SinkType.SQLITE


@dataclass
class MetricsConfig:
    """Metric configuration."""

    write_metrics: bool = field(
        default=True,
        metadata={"help": "Whether to write load statistics."},
    )
    output_dir: str = field(
        default="txbench_output",
        metadata={"help": "Output directory."},
    )

    def __post_init__(self):
        self.output_dir = (
            f"{self.output_dir}/{datetime.now().strftime('%Y-%m-%d_%H-%M-%S-%f')}"
        )


@dataclass
class BenchmarkConfig:
    seed: Optional[int] = field(
        default=42,
        metadata={"help": "Seed for the shared random source."},
    )
    log_level: str = field(
        default="info",
        metadata={"help": "Logging level."},
    )
    clear_before_load: bool = field(
        default=False,
        metadata={"help": "Delete existing rows before loading."},
    )
    loader_config: BaseLoaderConfig = field(
        default_factory=YcsbLoaderConfig,
        metadata={"help": "Loader config."},
    )
    sink_config: BaseSinkConfig = field(
        default_factory=InMemorySinkConfig,
        metadata={"help": "Data sink config."},
    )
    metrics_config: MetricsConfig = field(
        default_factory=MetricsConfig,
        metadata={"help": "Metrics config."},
    )

    @classmethod
    def create_from_cli_args(cls, args: Optional[List[str]] = None):
        flat_config = create_flat_dataclass(cls).create_from_cli_args(args)
        instance = flat_config.reconstruct_original_dataclass()
        instance.__flat_config__ = flat_config
        return instance

    def to_dict(self):
        if not hasattr(self, "__flat_config__"):
            logger.warning("Flat config not found. Returning the original config.")
            return dataclass_to_dict(self)

        return self.__flat_config__.__dict__

    def write_config_to_file(self):
        os.makedirs(self.metrics_config.output_dir, exist_ok=True)
        with open(f"{self.metrics_config.output_dir}/config.json", "w") as f:
            json.dump(dataclass_to_dict(self), f, indent=4)

from txbench.benchmark_module import BenchmarkModule
from txbench.config import BenchmarkConfig
from txbench.logger import set_log_level
from txbench.utils.random import set_seeds


def main() -> None:
    config: BenchmarkConfig = BenchmarkConfig.create_from_cli_args()

    set_log_level(config.log_level)
    if config.seed is not None:
        set_seeds(config.seed)

    if config.metrics_config.write_metrics:
        config.write_config_to_file()

    benchmark = BenchmarkModule(config)
    try:
        if config.clear_before_load:
            benchmark.clear_database()
        benchmark.load_database()
    finally:
        benchmark.close()


if __name__ == "__main__":
    main()

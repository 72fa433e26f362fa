from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    RunSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    DistanceTestCase,
    generate_random_sequences,
    generate_edge_cases,
)

from properties.benchmark import (
    BenchmarkResult,
    Timer,
    DataGenerator,
    Benchmark,
    run_quick_benchmark,
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "RunSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "DistanceTestCase",
    "generate_random_sequences",
    "generate_edge_cases",
    "BenchmarkResult",
    "Timer",
    "DataGenerator",
    "Benchmark",
    "run_quick_benchmark",
]

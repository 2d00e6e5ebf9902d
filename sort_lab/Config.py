from pathlib import Path

DEFAULT_N = 1000
STATISTICS_NS = [10, 100, 1000, 2000, 5000, 10000, 20000, 50000]
SAMPLE_SEED = 0x5EED
RESULT_DIR = Path("logs/statistics.csv")
TIME_UNIT = "s"

"""
Prometheus metrics for the solmint service.
"""
from prometheus_client import Counter

KEYPAIRS_GENERATED = Counter(
    'solmint_keypairs_generated_total',
    'Number of key pairs generated'
)

INSTRUCTIONS_BUILT = Counter(
    'solmint_instructions_built_total',
    'Number of instructions constructed',
    ['instruction']
)

ERRORS = Counter(
    'solmint_errors_total',
    'Number of error responses returned',
    ['error']
)


def record_error(error_name: str) -> None:
    """Increment the error counter for an error class name"""
    ERRORS.labels(error=error_name).inc()

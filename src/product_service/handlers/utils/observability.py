"""
Centralized observability utilities for the product Lambda handlers.

Configured instances of AWS Lambda Powertools for logging, tracing and
metrics, shared by the handler, logic and data access layers.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

METRICS_NAMESPACE = 'ProductsApi'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# Namespace can be overridden with POWERTOOLS_METRICS_NAMESPACE
metrics = Metrics(namespace=METRICS_NAMESPACE)

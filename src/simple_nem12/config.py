"""Configuration for the SimpleNEM12 parser."""

import os

from aws_lambda_powertools import Logger

# Logging service name; module loggers are children of `logger` below
SERVICE_NAME = os.environ.get("SIMPLE_NEM12_SERVICE_NAME", "simple-nem12")

logger = Logger(service=SERVICE_NAME)

# Encoding used when reading SimpleNEM12 files from disk
FILE_ENCODING = os.environ.get("SIMPLE_NEM12_FILE_ENCODING", "utf-8")

# =============================================================================
# Record format
# =============================================================================
DELIMITER = ","
DATE_FORMAT = "%Y%m%d"
DATE_LENGTH = 8
MIN_NMI_LENGTH = 10

# One 100 (start) and one 900 (end) record per file
EXPECTED_BOUNDARY_COUNT = 2

"""
Service context for log lines.

Identifies which process wrote a line when several API workers share a log sink.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticketmaster')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{socket.gethostname()}/{os.getpid()}'

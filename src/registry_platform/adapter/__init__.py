"""Host-facing server platform built on the service resolver."""

from .capabilities import Executor, ManagementServer, TransactionManager
from .dispatch import TaskDispatcher, run_inline
from .host import UNDEFINED_LOOKUP, HostServices, ServerPlatform, ThreadedHostServices
from .loader import import_target_server, load_platform
from .management import ManagementEndpoint
from .policies import EXECUTOR_POLICY, MANAGEMENT_POLICY, TRANSACTION_POLICY
from .server_platform import PlatformStatus, RegistryServerPlatform
from .transaction import RegistryTransactionController

__all__ = [
    "EXECUTOR_POLICY",
    "Executor",
    "HostServices",
    "MANAGEMENT_POLICY",
    "ManagementEndpoint",
    "ManagementServer",
    "PlatformStatus",
    "RegistryServerPlatform",
    "RegistryTransactionController",
    "ServerPlatform",
    "TRANSACTION_POLICY",
    "TaskDispatcher",
    "ThreadedHostServices",
    "TransactionManager",
    "UNDEFINED_LOOKUP",
    "import_target_server",
    "load_platform",
    "run_inline",
]

from .accounts import Account, AppAccount, EnvAccount
from .averages import Averages
from .bridge import PronoteBridge
from .cache import TtlCaches
from .config import AppConfig, Config, PathConfig
from .exceptions import GoogleTasksError, PronoteAuthenticationError, PronoteBridgeException, PronoteConfigError
from .google_tasks import GoogleTasks, recommended_task_list
from .grades import Grades
from .homeworks import Homeworks
from .session import PronoteSession
from .sync import sync_homeworks
from .timetable import Timetable

__all__ = [
    "Account",
    "AppAccount",
    "AppConfig",
    "Averages",
    "Config",
    "EnvAccount",
    "GoogleTasks",
    "GoogleTasksError",
    "Grades",
    "Homeworks",
    "PathConfig",
    "PronoteAuthenticationError",
    "PronoteBridge",
    "PronoteBridgeException",
    "PronoteConfigError",
    "PronoteSession",
    "Timetable",
    "TtlCaches",
    "recommended_task_list",
    "sync_homeworks",
]

"""dll-deploy: copy the DLLs a Windows binary needs into its directory."""

__version__ = "0.1.0"

from dll_deploy.classifier import Classification, classify
from dll_deploy.config import DeployConfig
from dll_deploy.exceptions import DeployError
from dll_deploy.inspector import BinaryInspector, ObjdumpInspector, locate_objdump
from dll_deploy.models import DeployReport
from dll_deploy.resolver import DllDeployer
from dll_deploy.search import DllSearcher

__all__ = [
    "BinaryInspector",
    "Classification",
    "DeployConfig",
    "DeployError",
    "DeployReport",
    "DllDeployer",
    "DllSearcher",
    "ObjdumpInspector",
    "classify",
    "locate_objdump",
]

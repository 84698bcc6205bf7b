"""Binary inspection backends."""

from dll_deploy.inspector.base import BinaryInspector
from dll_deploy.inspector.locator import locate_objdump
from dll_deploy.inspector.objdump import ObjdumpInspector

__all__ = ["BinaryInspector", "ObjdumpInspector", "locate_objdump"]

"""CLI entry point: deploy-dll.

Usage:
    deploy-dll path/to/app.exe
    deploy-dll app.exe --cmake-prefix-path C:/Qt/6.5/msvc2019_64 --verbose
    deploy-dll plugin.dll --deep-search-dir C:/msys64/mingw64 --allow-missing
"""

from __future__ import annotations

import os
import sys

import click
import structlog
from pydantic import ValidationError

from dll_deploy import __version__
from dll_deploy.config import OBJDUMP_AUTO, DeployConfig
from dll_deploy.core.logging import setup_logging
from dll_deploy.exceptions import DeployError, TargetNotFoundError
from dll_deploy.inspector.locator import locate_objdump
from dll_deploy.inspector.objdump import ObjdumpInspector
from dll_deploy.models import DeployReport
from dll_deploy.resolver import DllDeployer

log = structlog.get_logger("dll_deploy.cli")


def _absolute_target(binary_file: str) -> str:
    """Validate the target and make it absolute."""
    if not os.path.isfile(binary_file):
        raise TargetNotFoundError(f'The given target "{binary_file}" is not a file')
    if os.path.isabs(binary_file):
        return binary_file
    absolute = os.path.join(os.getcwd(), binary_file)
    log.debug("cli.relative_target", given=binary_file, converted=absolute)
    return absolute


def run_deploy(cfg: DeployConfig) -> DeployReport:
    """Deploy for ``cfg.binary_file``. Raises DeployError on any fatal condition."""
    binary = _absolute_target(cfg.binary_file)
    cfg = cfg.model_copy(update={"binary_file": binary})

    objdump = locate_objdump(cfg.objdump_file)
    log.debug("cli.objdump", path=objdump)

    deployer = DllDeployer(cfg, ObjdumpInspector(objdump))
    return deployer.deploy(binary)


@click.command()
@click.version_option(__version__, prog_name="deploy-dll")
@click.argument("binary_file")
@click.option("--skip-env-path", is_flag=True, help="Do not search in system variable PATH")
@click.option(
    "--copy-vc-redist", is_flag=True, help="Copy Microsoft Visual C/C++ redistributable dlls"
)
@click.option("--verbose", is_flag=True, help="Show verbose information during execution")
@click.option("--shallow-search-dir", multiple=True, help="Search for dll in this dir")
@click.option("--no-shallow-search", is_flag=True, help="Disable shallow search")
@click.option(
    "--deep-search-dir", multiple=True, help="Search for dll recursively in this dir"
)
@click.option("--no-deep-search", is_flag=True, help="Disable recursive search")
@click.option(
    "--cmake-prefix-path",
    multiple=True,
    help="CMAKE_PREFIX_PATH for cmake to search for packages",
)
@click.option("--ignore", multiple=True, help="Dll file that won't be deployed")
@click.option(
    "--objdump-file",
    default=OBJDUMP_AUTO,
    envvar="DLL_DEPLOY_OBJDUMP",
    show_default=True,
    help="Location of objdump. Valid values: [auto] [system] [builtin] path",
)
@click.option(
    "--allow-missing",
    is_flag=True,
    help="If one or more dll failed to be found, skip it and go on",
)
def main(
    binary_file: str,
    skip_env_path: bool,
    copy_vc_redist: bool,
    verbose: bool,
    shallow_search_dir: tuple[str, ...],
    no_shallow_search: bool,
    deep_search_dir: tuple[str, ...],
    no_deep_search: bool,
    cmake_prefix_path: tuple[str, ...],
    ignore: tuple[str, ...],
    objdump_file: str,
    allow_missing: bool,
) -> None:
    """Deploy dll for exe or dll."""
    try:
        cfg = DeployConfig(
            binary_file=binary_file,
            skip_env_path=skip_env_path,
            copy_vc_redist=copy_vc_redist,
            verbose=verbose,
            shallow_search_dir=list(shallow_search_dir),
            no_shallow_search=no_shallow_search,
            deep_search_dir=list(deep_search_dir),
            no_deep_search=no_deep_search,
            cmake_prefix_path=list(cmake_prefix_path),
            ignore=list(ignore),
            objdump_file=objdump_file,
            allow_missing=allow_missing,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(cfg.verbose)

    try:
        report = run_deploy(cfg)
    except DeployError as e:
        click.echo(str(e), err=True)
        sys.exit(e.exit_code)

    for missing in report.missing:
        click.echo(
            f'Failed to find dll "{missing.name}", required by "{missing.required_by}", skipped'
        )

    log.info(
        "cli.deployed",
        binary=report.binary,
        copied=len(report.copied),
        missing=len(report.missing),
    )


if __name__ == "__main__":
    main()

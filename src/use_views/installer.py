import os
import subprocess

from .errors import InstallError


def uses_yarn(project_dir) -> bool:
    return os.path.exists(os.path.join(project_dir, "yarn.lock"))


def install_command(project_dir):
    return ["yarn"] if uses_yarn(project_dir) else ["npm", "install"]


def install(project_dir):
    """Install the project's dependencies with yarn or npm, blocking until done."""
    command = install_command(project_dir)
    print(f"Running: {' '.join(command)}")
    try:
        subprocess.run(command, cwd=project_dir, check=True)
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"`{' '.join(command)}` exited with status {e.returncode}",
            command=command,
            returncode=e.returncode,
        ) from e
    except OSError as e:
        raise InstallError(f"could not run `{command[0]}`: {e}", command=command) from e

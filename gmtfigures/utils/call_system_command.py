#
#    Copyright (C) 2024-2025 The University of Sydney, Australia
#
#    This program is free software; you can redistribute it and/or modify it under
#    the terms of the GNU General Public License, version 2, as published by
#    the Free Software Foundation.
#
#    This program is distributed in the hope that it will be useful, but WITHOUT
#    ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
#    FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
#    for more details.
#
#    You should have received a copy of the GNU General Public License along
#    with this program; if not, write to Free Software Foundation, Inc.,
#    51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.
#
import logging
import subprocess

logger = logging.getLogger("gmtfigures")


# Function to call a command on the system (based on 'subprocess' module).
#   Option to check return code of command and which return code to check (defaults to checking code 0 for success).
#   Option to raise error or return None on failure (raises by default).
#   Option to log an error message on failure (logs by default).
#   Option to pass a stdin string to the standard input of command (not passed by default).
#   Option to send stdout of command to an open file (e.g. shell-style "> output.ps").
#   Option to receive stdout/stderr strings from the standard output/error of command (not received by default).
#   Option to return the exit code of the command instead of True.
#   Optionally pass advanced parameters to 'subprocess.Popen()' such as 'cwd' (no advanced parameters passed by default).
#
# On success:
#    Returns (stdout, stderr) tuple of strings if 'return_stdout' and 'return_stderr' are True,
#    else returns stdout string if only 'return_stdout' is True,
#    else returns stderr string if only 'return_stderr' is True,
#    else returns the exit code if 'return_code' is True,
#    else returns True.
#
# On failure:
#    Raises an exception if 'raise_errors' is True,
#    else returns None (which can be tested as if it was 'False').
#
def call_system_command(
    args,  # Command and its arguments - either a single string or a sequence of arguments (see subprocess.Popen()).
    check_return_code=0,  # Check command's return code with this value (set to None to avoid checking).
    raise_errors=True,  # Whether to raise an exception when there's an error (terminates calling script unless caught).
    print_errors=True,  # Whether to log an error message when there's an error.
    stdin=None,  # Optional string to send to stdin of the command.
    stdout=None,  # Optional open (binary) file object to receive stdout of the command.
    return_stdout=False,  # Whether to capture, and return, stdout of the command.
    return_stderr=False,  # Whether to capture, and return, stderr of the command.
    return_code=False,  # Whether to return the exit code of the command.
    **subprocess_options,  # Advanced options passed directly to subprocess.Popen().
):
    if stdout is not None and return_stdout:
        raise ValueError("'stdout' and 'return_stdout' cannot be used together.")

    stdin_pipe = subprocess.PIPE if stdin is not None else None
    if return_stdout:
        stdout_pipe = subprocess.PIPE
    else:
        stdout_pipe = stdout
    stderr_pipe = subprocess.PIPE if return_stderr else None

    # only decode text when we are capturing it, file output is passed through as bytes
    text_mode = stdin is not None or return_stdout or return_stderr

    logger.debug(f"Running system command: {args}")
    try:
        command = subprocess.Popen(
            args,
            stdin=stdin_pipe,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            universal_newlines=text_mode,
            **subprocess_options,
        )
        out, err = command.communicate(stdin)
    except ValueError as e:
        if print_errors:
            logger.error(f"System command called with invalid arguments: {e}")
        if not raise_errors:
            return None
        raise
    except OSError as e:
        if print_errors:
            logger.error(f"Unable to execute system command: {args} {e}")
        if not raise_errors:
            return None
        raise

    command_return_code = command.returncode
    logger.debug(f"System command {args} return code: {command_return_code}")

    # Check return code (if requested).
    if check_return_code is not None and command_return_code != check_return_code:
        if print_errors:
            logger.error(
                f"System command failed: {args} return code: {command_return_code}"
            )
        if not raise_errors:
            return None

        # Raise same error that subprocess.check_call() does.
        raise subprocess.CalledProcessError(
            command_return_code, args, output=out, stderr=err
        )

    if return_stdout and return_stderr:
        return out, err
    elif return_stdout:
        return out
    elif return_stderr:
        return err
    elif return_code:
        return command_return_code

    return True

"""GitHub Actions workflow commands: step outputs and job failure."""

import os
import uuid


def _escape_data(value: str) -> str:
    return value.replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(':', '%3A').replace(',', '%2C')


def set_output(name: str, value: str) -> None:
    """Set a step output.

    Appends to the file named by GITHUB_OUTPUT when the runner provides one,
    otherwise falls back to the legacy ``::set-output`` command on stdout.
    """
    output_path = os.environ.get('GITHUB_OUTPUT')
    if not output_path:
        print(f"::set-output name={_escape_property(name)}::{_escape_data(value)}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Output '{name}' contains the heredoc delimiter")
    with open(output_path, 'a', encoding='utf-8') as handle:
        handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> int:
    """Report ``message`` as the job's failure reason. Returns the exit code."""
    print(f"::error::{_escape_data(message)}")
    return 1


__all__ = ["set_output", "set_failed"]

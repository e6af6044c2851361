"""Custom argparse actions for improved CLI argument handling.

This module provides custom actions that record which options the user gave
explicitly, so configuration files never override them, and that read
environment variable defaults using the pattern ``LINEDIFF_<DEST>``.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from linediff.constants import ENV_PREFIX

TRUTHY_VALUES = ("true", "1", "yes", "on")


def env_var_name(dest: str) -> str:
    """Return the environment variable holding the default for ``dest``."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


def provided_args(namespace: argparse.Namespace) -> set[str]:
    """Return the destinations the user set explicitly on the command line."""
    return getattr(namespace, "_provided_args", set())


class TrackingStoreAction(argparse.Action):
    """Custom action that tracks whether an argument was explicitly provided.

    This action stores both the value and metadata about whether the argument
    was provided by the user, making it easier to distinguish between default
    values and user-provided values that happen to match the default.

    Also supports environment variable defaults using the pattern LINEDIFF_DEST_NAME.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the tracking store action.

        Parameters
        ----------
        option_strings : Sequence[str]
            The option strings for this action
        dest : str
            The attribute name to store the value
        nargs : Optional[Union[int, str]]
            Number of arguments to consume
        const : Optional[Any]
            Constant value for special cases
        default : Optional[Any]
            Default value if not provided
        type : Optional[Any]
            Type conversion function
        choices : Optional[Sequence[Any]]
            Valid choices for the argument
        required : bool
            Whether this argument is required
        help : Optional[str]
            Help text for the argument
        metavar : Optional[Union[str, tuple[str, ...]]]
            Display name for the argument value

        """
        # Check environment variable and set as default if present
        env_key = env_var_name(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                converted = type(env_value) if type is not None else env_value
                if choices is not None and converted not in choices:
                    raise ValueError(f"expected one of {', '.join(map(str, choices))}")
                default = converted
            except (ValueError, TypeError, argparse.ArgumentTypeError) as e:
                logging.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value and mark it as explicitly provided."""
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class TrackingStoreTrueAction(argparse.Action):
    """Custom store_true action that tracks whether the flag was explicitly provided.

    Also supports environment variable defaults using the pattern LINEDIFF_DEST_NAME.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the tracking store_true action."""
        env_value = os.environ.get(env_var_name(dest))
        if env_value is not None:
            default = env_value.lower() in TRUTHY_VALUES

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True and mark as explicitly provided."""
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)


class TrackingStoreConstAction(argparse.Action):
    """Custom store_const action for flags that share one destination.

    Used for mutually exclusive switches such as ``--normal``/``--unified``.
    The environment default is accepted only when it is one of ``choices``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        const: Any,
        default: Any = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the tracking store_const action."""
        env_key = env_var_name(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            if choices is None or env_value in choices:
                default = env_value
            else:
                logging.warning(f"Invalid environment variable {env_key}={env_value}: expected one of {choices}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=const,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the constant and mark as explicitly provided."""
        setattr(namespace, self.dest, self.const)
        _mark_provided(namespace, self.dest)

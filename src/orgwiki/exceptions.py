#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by orgwiki.

Every error the exporter raises on purpose derives from
:class:`OrgWikiError`, so callers can catch the whole family at once. The
CLI maps each branch to its own exit code.

Exception Hierarchy
-------------------
- OrgWikiError

  - ValidationError (rejected option or configuration value)
    - InvalidOptionsError (renderer given the wrong options class)

  - FileError (input tree, configuration or id locations unreadable)

  - ParsingError (JSON that does not describe a document tree)

  - RenderingError (export failures)
    - UnhandledNodeTypeError (object in the tree that is not a node kind)
    - OutputWriteError (output could not be written or encoded)

"""

from typing import Any


class OrgWikiError(Exception):
    """Root of the orgwiki exception hierarchy.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to a user
    original_error : Exception, optional
        Lower-level exception this error wraps

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        Wrapped exception, when there is one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(OrgWikiError):
    """A configuration or option value was rejected.

    Parameters
    ----------
    message : str
        Why the value was rejected
    parameter_name : str, optional
        Option or configuration key at fault
    parameter_value : any, optional
        Rejected value
    original_error : Exception, optional
        Lower-level exception, e.g. a ``ValueError`` from option validation

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer or exporter was given options of the wrong class.

    Parameters
    ----------
    renderer_name : str
        Renderer that refused the options
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Class of the object it was given
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"The {renderer_name} renderer takes {expected_type.__name__}, "
                f"not {received_type.__name__}."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type, original_error=original_error)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(OrgWikiError):
    """A file orgwiki needs to read is missing or unreadable.

    Parameters
    ----------
    message : str
        What could not be read
    file_path : str, optional
        Offending path
    original_error : Exception, optional
        Underlying ``OSError`` or decoding error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(OrgWikiError):
    """Serialized input does not describe a valid document tree.

    Parameters
    ----------
    message : str
        What is wrong with the input
    parsing_stage : str, optional
        ``"json_decode"``, ``"schema_validation"`` or ``"deserialization"``
    original_error : Exception, optional
        Underlying decoder or constructor error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(OrgWikiError):
    """Exporting a tree to wiki markup failed.

    Parameters
    ----------
    message : str
        What failed
    rendering_stage : str, optional
        ``"dispatch"`` for node handling, ``"file_write"`` for output
    original_error : Exception, optional
        Underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnhandledNodeTypeError(RenderingError):
    """The tree holds an object that is not one of the node kinds.

    Parameters
    ----------
    node_type : str
        Class name of the offending object

    """

    def __init__(self, node_type: str, message: str | None = None):
        if message is None:
            message = f"No rendering handler for node type: {node_type}"
        super().__init__(message, rendering_stage="dispatch")
        self.node_type = node_type


class OutputWriteError(RenderingError):
    """Rendered text could not be written in the output coding.

    Parameters
    ----------
    file_path : str
        Output path, or the name of the stream
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        Underlying ``OSError`` or ``UnicodeEncodeError``

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Could not write wiki output to {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path

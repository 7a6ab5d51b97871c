"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def formatter_capability_failed(
        formatter_name: str, value_type: str, error: Exception, path: str
    ) -> Diagnostic:
        """Formatter raised from can_handle().

        Args:
            formatter_name: Class name of the formatter
            value_type: Type name of the value being checked
            error: The exception raised by the formatter
            path: Member path of the value

        Returns:
            Diagnostic for FORMATTER_CAPABILITY_FAILED
        """
        msg = (
            f"Formatter '{formatter_name}' failed to check a value of type "
            f"'{value_type}': {type(error).__name__}: {error}"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_CAPABILITY_FAILED,
            message=msg,
            hint="can_handle() must return a bool for any value without raising",
            value_type=value_type,
            formatter_name=formatter_name,
            path=path,
        )

    @staticmethod
    def formatter_render_failed(
        formatter_name: str, value_type: str, error: Exception, path: str
    ) -> Diagnostic:
        """Formatter raised from format().

        Args:
            formatter_name: Class name of the formatter
            value_type: Type name of the value being rendered
            error: The exception raised by the formatter
            path: Member path of the value

        Returns:
            Diagnostic for FORMATTER_RENDER_FAILED
        """
        msg = (
            f"Formatter '{formatter_name}' failed to render a value of type "
            f"'{value_type}': {type(error).__name__}: {error}"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_RENDER_FAILED,
            message=msg,
            hint="Fix the formatter or remove it from the chain",
            value_type=value_type,
            formatter_name=formatter_name,
            path=path,
        )

    @staticmethod
    def no_formatter_found(value_type: str, path: str) -> Diagnostic:
        """No formatter accepted the value.

        Args:
            value_type: Type name of the value
            path: Member path of the value

        Returns:
            Diagnostic for NO_FORMATTER_FOUND
        """
        msg = f"No formatter accepted a value of type '{value_type}'"
        return Diagnostic(
            code=DiagnosticCode.NO_FORMATTER_FOUND,
            message=msg,
            hint="End the built-in chain with a formatter that accepts every value",
            value_type=value_type,
            path=path,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int, path: str | None = None) -> Diagnostic:
        """Maximum rendering depth exceeded.

        Args:
            max_depth: The maximum allowed depth
            path: Member path where the limit was hit (optional)

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum recursion depth ({max_depth}) exceeded"
        if path is not None:
            msg = f"{msg} at '{path}'"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Increase max_depth on the formatting options to include more nesting levels",
            path=path,
            severity="warning",
        )

    @staticmethod
    def cyclic_reference(value_type: str, cycle_path: list[str]) -> Diagnostic:
        """Value references one of its ancestors.

        Args:
            value_type: Type name of the repeated value
            cycle_path: Member paths from the first occurrence to the repeat

        Returns:
            Diagnostic for CYCLIC_REFERENCE
        """
        cycle_chain = " -> ".join(cycle_path)
        msg = f"Cyclic reference to type '{value_type}' detected: {cycle_chain}"
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_REFERENCE,
            message=msg,
            value_type=value_type,
            path=cycle_path[-1] if cycle_path else None,
            severity="warning",
        )

    @staticmethod
    def max_lines_exceeded(max_lines: int, line_count: int) -> Diagnostic:
        """Rendered output was longer than max_lines.

        Args:
            max_lines: The configured line cap
            line_count: Number of lines before truncation

        Returns:
            Diagnostic for MAX_LINES_EXCEEDED
        """
        msg = f"Output of {line_count} lines exceeded the maximum of {max_lines} lines"
        return Diagnostic(
            code=DiagnosticCode.MAX_LINES_EXCEEDED,
            message=msg,
            hint="Increase max_lines on the formatting options to include more lines",
            severity="warning",
        )

    @staticmethod
    def scope_not_active() -> Diagnostic:
        """Scope exit requested with no active scope.

        Returns:
            Diagnostic for SCOPE_NOT_ACTIVE
        """
        return Diagnostic(
            code=DiagnosticCode.SCOPE_NOT_ACTIVE,
            message="No formatting scope is active in the current context",
            hint="Call on_scope_exit() once per on_scope_enter(), in the same context",
        )

    @staticmethod
    def scope_order_violation(depth: int) -> Diagnostic:
        """Scope exit requested for a scope that is not the innermost one.

        Args:
            depth: Number of active scopes at the time of the call

        Returns:
            Diagnostic for SCOPE_ORDER_VIOLATION
        """
        msg = f"Formatting scope exited out of order ({depth} scope(s) active)"
        return Diagnostic(
            code=DiagnosticCode.SCOPE_ORDER_VIOLATION,
            message=msg,
            hint="Scopes must be exited in reverse order of entry",
        )


import logging
from typing import Any, Iterable, Sequence

from tabulate import tabulate


class LoggerMixin:
    """
    Gives every solver class its own configurable logger.

    The logger is named ``<module>.<ClassName>`` and stays silent (level
    WARNING, :any:`logging.NullHandler`) unless the instance is created with
    ``debug=True``, in which case a formatted stream handler is attached and
    the level is lowered to DEBUG.

    Dataclasses with a ``debug`` field, declared on the class itself or on a
    dataclass base, get their ``__post_init__`` wrapped once, so the logger
    is available inside it and derived solvers set it up only once. Regular
    classes get their ``__init__`` wrapped and receive the ``debug`` keyword
    unchanged.

    Parameters
    ----------
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.

    Attributes
    ----------
    logger : logging.Logger
        The logger configured for the concrete subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def debug_table(self, title: str, rows: Iterable[Sequence[Any]],
                    header: Sequence[str], decimals: int = 3):
        """Log ``rows`` as a grid table at DEBUG level.

        The table is only rendered when DEBUG output is enabled.
        """
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("%s:\n%s", title,
                              table_rows(rows, header, decimals))

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = any("debug" in getattr(c, "__annotations__", {})
                        for c in cls.__mro__)

        # dataclass: set the logger up before __post_init__ runs
        orig_post = getattr(cls, "__post_init__", None)
        if orig_post is not None and has_debug:
            # subclasses of a dataclass solver inherit the wrapped hook
            if getattr(orig_post, "_sets_up_logger", False):
                return

            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            wrapped_post._sets_up_logger = True
            cls.__post_init__ = wrapped_post
            return

        orig_init = getattr(cls, "__init__", None)
        if orig_init is not LoggerMixin.__init__:

            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                if orig_init is not None:
                    return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_rows(rows: Iterable[Sequence[Any]], header: Sequence[str],
               decimals: int = 3) -> str:
    """Render labelled value rows as a grid table.

    Parameters
    ----------
    rows : iterable of sequence
        One row per quantity, e.g. ``('Iz', 6.67e7, 'mm⁴')``.
    header : sequence of str
        Column titles.
    decimals : int, default=3
        Number of decimals used for floating point columns.

    Returns
    -------
    str
        The formatted table.
    """
    return tabulate(list(rows), headers=list(header), tablefmt="grid",
                    floatfmt=f".{decimals}f")

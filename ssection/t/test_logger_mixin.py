import logging
from unittest import TestCase

import numpy as np

from ssection.core.logger_mixin import LoggerMixin, table_rows
from ssection.core.preprocessing.geometry import PolygonPart
from ssection.core.solution import (
    PlasticModulusSolver, ScanLineIntegrator, SectionSolver, SlicedSection
)


SQUARE = np.array([(0, 0), (4, 0), (4, 2), (0, 2)], dtype=float)


class TestLoggerMixin(TestCase):

    def test_logger_name_and_level(self):
        scan = ScanLineIntegrator([SQUARE])
        self.assertEqual(scan.logger.name,
                         'ssection.core.solution.scan_line.ScanLineIntegrator')
        self.assertEqual(scan.logger.level, logging.WARNING)
        self.assertFalse(scan.logger.propagate)

    def test_debug_flag(self):
        scan = ScanLineIntegrator([SQUARE], debug=True)
        self.addCleanup(self._drop_stream_handlers, scan.logger)
        self.assertEqual(scan.logger.level, logging.DEBUG)
        self.assertTrue(any(isinstance(h, logging.StreamHandler)
                            for h in scan.logger.handlers))

    @staticmethod
    def _drop_stream_handlers(logger):
        for handler in list(logger.handlers):
            if isinstance(handler, logging.StreamHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.WARNING)

    def test_derived_solvers_wrapped_once(self):
        for cls in (ScanLineIntegrator, PlasticModulusSolver):
            self.assertIs(cls.__post_init__, SlicedSection.__post_init__,
                          f'{cls.__name__} must reuse the wrapped hook.')
            self.assertIs(cls.__init__, SlicedSection.__init__,
                          f'{cls.__name__} must not wrap __init__ again.')

    def test_plain_class(self):
        class Plain(LoggerMixin):
            def __init__(self, value, debug=False):
                self.value = value

        obj = Plain(3)
        self.assertEqual(obj.value, 3)
        self.assertEqual(obj.logger.level, logging.WARNING)

    def test_debug_table(self):
        solver = SectionSolver(
            [PolygonPart([(0, 0), (100, 0), (100, 200), (0, 200)])])
        with self.assertLogs(solver.logger, level='DEBUG') as cm:
            solver.properties
        output = '\n'.join(cm.output)
        self.assertIn('Results:', output)
        self.assertIn('| Iz', output)

    def test_table_rows(self):
        table = table_rows([('A', 1.23456, 'mm²')],
                           ['Property', 'Value', 'Unit'], decimals=2)
        self.assertIn('1.23', table)
        self.assertTrue(table.startswith('+'),
                        'Tables use the grid format.')

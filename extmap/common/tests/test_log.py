#  ___________________________________________________________________________
#
#  extmap: Set Algebra for Python Mappings
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import logging
from io import StringIO

import extmap.common.unittest as unittest

from extmap.common.log import (
    LoggingIntercept,
    WrappingFormatter,
    _RootHandlerFilter,
    extmap_handler,
    extmap_logger,
)

logger = logging.getLogger('extmap.common.tests.logtarget')


class TestWrappingFormatter(unittest.TestCase):
    def setUp(self):
        self.stream = StringIO()
        self.handler = logging.StreamHandler(self.stream)
        self.handler.setFormatter(WrappingFormatter())
        self._saved = logger.handlers, logger.propagate, logger.level
        logger.handlers = [self.handler]
        logger.propagate = False
        logger.setLevel(logging.INFO)

    def tearDown(self):
        logger.handlers, logger.propagate, level = self._saved
        logger.setLevel(level)

    def test_default_format(self):
        logger.info("key %s in %s", 'a', 'map')
        self.assertEqual(self.stream.getvalue(), "INFO: key a in map\n")

    def test_custom_format(self):
        self.handler.setFormatter(WrappingFormatter('[%(name)s] %(message)s'))
        logger.warning("done")
        self.assertEqual(
            self.stream.getvalue(), "[extmap.common.tests.logtarget] done\n"
        )

    def test_wrapping(self):
        logger.warning(' '.join(['token'] * 16))
        self.assertEqual(
            self.stream.getvalue(),
            "WARNING: " + ' '.join(['token'] * 11) + "\n"
            "    " + ' '.join(['token'] * 5) + "\n",
        )

    def test_multiline_message(self):
        logger.warning(
            """header
            body line
              nested"""
        )
        self.assertEqual(
            self.stream.getvalue(),
            "WARNING: header\n    body line\n      nested\n",
        )

    def test_blank_lines_kept(self):
        logger.warning("above\n\nbelow")
        self.assertEqual(self.stream.getvalue(), "WARNING: above\n\n    below\n")

    def test_hang_and_width(self):
        self.handler.setFormatter(WrappingFormatter(wrap=20, hang=''))
        logger.warning("alpha beta gamma delta epsilon")
        self.assertEqual(
            self.stream.getvalue(), "WARNING: alpha beta\ngamma delta epsilon\n"
        )


class TestPackageLogger(unittest.TestCase):
    def test_handler(self):
        self.assertIn(extmap_handler, extmap_logger.handlers)
        self.assertIsInstance(extmap_handler.formatter, WrappingFormatter)

    def test_root_handler_filter(self):
        root = logging.getLogger()
        record = logging.LogRecord('extmap', logging.WARNING, '', 0, 'msg', None, None)
        f = _RootHandlerFilter()
        saved = root.handlers
        try:
            root.handlers = []
            self.assertTrue(f.filter(record))
            root.handlers = [logging.NullHandler()]
            self.assertFalse(f.filter(record))
        finally:
            root.handlers = saved


class TestLoggingIntercept(unittest.TestCase):
    def test_target(self):
        self.assertEqual(LoggingIntercept().module, 'root')
        self.assertEqual(
            LoggingIntercept(module='extmap.collections').module, 'extmap.collections'
        )
        self.assertEqual(LoggingIntercept(logger=logger).module, logger.name)

        with self.assertRaisesRegex(
            ValueError, "LoggingIntercept\\(\\) accepts 'module' or 'logger', not both"
        ):
            LoggingIntercept(module='extmap', logger=logger)

    def test_level(self):
        out = StringIO()
        with LoggingIntercept(out, logger.name) as stream:
            logger.info('skipped')
            logger.warning('kept')
        self.assertIs(stream, out)
        self.assertEqual(out.getvalue(), 'kept\n')

        with LoggingIntercept(level=logging.DEBUG, logger=logger) as stream:
            logger.debug('detail')
        self.assertEqual(stream.getvalue(), 'detail\n')

    def test_formatter(self):
        fmt = logging.Formatter('%(levelname)s|%(message)s')
        with LoggingIntercept(logger=logger, formatter=fmt) as stream:
            logger.error('failed')
        self.assertEqual(stream.getvalue(), 'ERROR|failed\n')

    def test_restore(self):
        h = logging.NullHandler()
        logger.addHandler(h)
        try:
            with LoggingIntercept(logger=logger, level=logging.ERROR):
                self.assertFalse(logger.propagate)
                self.assertEqual(logger.level, logging.ERROR)
                self.assertNotIn(h, logger.handlers)
            self.assertTrue(logger.propagate)
            self.assertEqual(logger.level, logging.NOTSET)
            self.assertIn(h, logger.handlers)
        finally:
            logger.removeHandler(h)


if __name__ == '__main__':
    unittest.main()

import unittest
from unittest import mock

from phraseclock.utils import trace
from phraseclock.utils.numberwords import spell_number


class TestTraceDecorator(unittest.TestCase):
    """Unit tests for the trace() decorator."""

    def setUp(self):
        trace.setup_tracing()

    def tearDown(self):
        trace.setup_tracing(False)

    @mock.patch('phraseclock.utils.trace.LOG')
    def test_no_debug(self, mock_log):
        mock_log.isEnabledFor.return_value = False

        @trace.trace
        def add(x, y):
            return x + y

        self.assertEqual(3, add(1, 2))
        mock_log.debug.assert_not_called()

    @mock.patch('phraseclock.utils.trace.LOG')
    def test_tracing_disabled(self, mock_log):
        mock_log.isEnabledFor.return_value = True
        trace.setup_tracing(False)

        @trace.trace
        def add(x, y):
            return x + y

        self.assertEqual(3, add(1, 2))
        mock_log.debug.assert_not_called()

    @mock.patch('phraseclock.utils.trace.LOG')
    def test_call_and_return_logged(self, mock_log):
        mock_log.isEnabledFor.return_value = True

        self.assertEqual("forty two", spell_number(42))
        self.assertEqual(2, mock_log.debug.call_count)
        call_args = mock_log.debug.call_args_list
        self.assertEqual("spell_number", call_args[0][0][1]["func"])
        self.assertEqual("forty two", call_args[1][0][1]["result"])

    @mock.patch('phraseclock.utils.trace.LOG')
    def test_exception(self, mock_log):
        mock_log.isEnabledFor.return_value = True

        @trace.trace
        def broken():
            raise ValueError('Test error')

        with self.assertRaises(ValueError):
            broken()

        self.assertIn("exception", mock_log.debug.call_args[0][0])

    @mock.patch('phraseclock.utils.trace.LOG')
    def test_with_filter(self, mock_log):
        mock_log.isEnabledFor.return_value = True

        def filter_func(args):
            return args.get('x') > 0

        @trace.trace(filter_function=filter_func)
        def add(x, y):
            return x + y

        add(1, 2)
        self.assertTrue(mock_log.debug.called)

        mock_log.reset_mock()
        self.assertEqual(-1, add(-2, 1))
        mock_log.debug.assert_not_called()

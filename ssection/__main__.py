import os
import sys
import unittest


def run_tests():
    try:
        # Resolves when 'ssection' is installed or run from the project root.
        from ssection import t
    except ImportError:
        print("Error: Could not find the test package.")
        print("Make sure you are running the command in the project's root "
              "directory.")
        sys.exit(1)

    start_dir = os.path.dirname(t.__file__)
    top_level_dir = os.path.dirname(os.path.dirname(start_dir))

    loader = unittest.TestLoader()
    suite = loader.discover(start_dir, pattern='test_*.py',
                            top_level_dir=top_level_dir)

    # verbosity=0 only prints the summary.
    runner = unittest.TextTestRunner(verbosity=0)
    result = runner.run(suite)

    sys.exit(not result.wasSuccessful())


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == 'test':
        run_tests()
    else:
        print("Unknown command.")
        print("Usage: python -m ssection test")

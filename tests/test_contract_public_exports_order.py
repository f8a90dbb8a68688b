import unittest


class TestPublicExportsOrderContract(unittest.TestCase):
    def test_public_exports_are_sorted_and_consistent(self):
        import yearview.api as api

        self.assertIsInstance(api._PUBLIC_EXPORTS, tuple)

        # No duplicates
        seen = set()
        for name in api._PUBLIC_EXPORTS:
            self.assertNotIn(name, seen, f"Duplicate in _PUBLIC_EXPORTS: {name}")
            seen.add(name)

        # Alphabetical (exception classes sort ahead of the lowercase functions)
        self.assertEqual(list(api._PUBLIC_EXPORTS), sorted(api._PUBLIC_EXPORTS))

        # __all__ follows _PUBLIC_EXPORTS order, filtered to defined names
        expected_all = [n for n in api._PUBLIC_EXPORTS if n in api.__dict__]
        self.assertEqual(api.__all__, expected_all)

    def test_every_export_is_defined(self):
        import yearview.api as api

        # A name listed but never imported would silently drop out of __all__.
        missing = [n for n in api._PUBLIC_EXPORTS if n not in api.__dict__]
        self.assertEqual(missing, [])

    def test_error_types_are_value_errors(self):
        import yearview.api as api

        for name in ("PayloadValidationError", "SessionLoadError"):
            self.assertTrue(issubclass(getattr(api, name), ValueError), name)


if __name__ == "__main__":
    raise SystemExit(unittest.main())

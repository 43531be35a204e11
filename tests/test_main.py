"""Main test module for employee-time-visualizer."""

import employee_time_visualizer


class TestVersion:
    """Test version information."""

    def test_version_exists(self) -> None:
        """Verifies that version string is defined in package.

        Tests that the __version__ attribute is set, ensuring the
        package can report its version.

        Business context:
        Version information is required for package distribution and
        for the --version flag used when troubleshooting scheduled runs.

        Arrangement:
        None - tests package-level attribute.

        Action:
        Access __version__ attribute.

        Assertion Strategy:
        Validates version is not None.
        """
        assert employee_time_visualizer.__version__ is not None

    def test_version_format(self) -> None:
        """Verifies version follows semantic versioning format.

        Tests that version string has MAJOR.MINOR.PATCH structure
        with numeric components.

        Arrangement:
        None - tests package-level attribute.

        Action:
        Parse version string and validate components.

        Assertion Strategy:
        Validates 3 parts, all numeric.

        Testing Principle:
        Validates version convention compliance.
        """
        parts = employee_time_visualizer.__version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_title_exists(self) -> None:
        """Verifies that package title matches the import name."""
        assert employee_time_visualizer.__title__ == "employee_time_visualizer"

    def test_author_exists(self) -> None:
        """Verifies that package author is defined."""
        assert employee_time_visualizer.__author__ == "Mark Grandau"

    def test_all_exports_resolve(self) -> None:
        """Verifies every name in __all__ is an attribute of the package."""
        for name in employee_time_visualizer.__all__:
            assert hasattr(employee_time_visualizer, name)

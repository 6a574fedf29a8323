"""Basic import tests to verify package structure."""


def test_import_intcode():
    """Verify main package imports."""
    import intcode
    assert intcode.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from intcode import core
    assert hasattr(core, "Machine")


def test_import_fabric():
    """Verify fabric module structure exists."""
    from intcode import fabric
    assert hasattr(fabric, "Network")


def test_import_scenarios():
    """Verify scenarios module structure exists."""
    from intcode import scenarios
    assert hasattr(scenarios, "__doc__")


def test_import_analysis_and_viz():
    from intcode import analysis, viz
    assert hasattr(analysis, "find_intersections")
    assert hasattr(analysis, "bfs_distances")
    assert hasattr(viz, "plot_grid")

def test_import_runeclicker_package() -> None:
    import importlib

    module = importlib.import_module("runeclicker")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from runeclicker.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_engine_controller() -> None:
    from runeclicker.services.controllers import EngineController

    assert EngineController().get_state().wave == 1

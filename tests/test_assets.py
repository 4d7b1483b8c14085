import pytest

from enquiry_app.assets import ScriptRegistry, scripts


def test_enquiry_script_loads_after_add_to_cart():
    handles = [script.handle for script in scripts.ordered(['enquiry'])]
    assert handles == ['add-to-cart', 'enquiry']


def test_dependencies_resolved_once():
    registry = ScriptRegistry()
    registry.register('base', 'js/base.js')
    registry.register('a', 'js/a.js', deps=['base'])
    registry.register('b', 'js/b.js', deps=['base', 'a'])

    assert [s.handle for s in registry.ordered()] == ['base', 'a', 'b']


def test_circular_dependency_raises():
    registry = ScriptRegistry()
    registry.register('a', 'js/a.js', deps=['b'])
    registry.register('b', 'js/b.js', deps=['a'])

    with pytest.raises(ValueError):
        registry.ordered(['a'])


def test_unknown_handle_raises():
    with pytest.raises(KeyError):
        ScriptRegistry().ordered(['missing'])

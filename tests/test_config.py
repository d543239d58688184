from voter_guide.core import config

def test_config_values():
    assert config.SESSION_SECRET is not None
    assert config.ORIGIN is not None
    assert config.INTRO_PROMPT == "Begin by choosing one of the options below"
    assert config.TREE_FETCH_TIMEOUT > 0

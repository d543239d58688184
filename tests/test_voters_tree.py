import pytest
from voter_guide.core.voters_tree import VOTERS_DECISION_TREE
from voter_guide.models.decision_tree import DecisionTree
from voter_guide.services.navigator import Navigator
from voter_guide.services.tree_provider import CachedTreeSource, StaticTreeProvider

@pytest.fixture
def tree():
    return DecisionTree.from_mapping(VOTERS_DECISION_TREE)

def record(channel):
    received = []
    channel.subscribe(received.append)
    return received

def test_shipped_tree_has_eight_outcomes(tree):
    assert tree.outcomes() == [1, 2, 3, 4, 5, 6, 7, 8]

def test_shipped_tree_has_no_dangling_references(tree):
    for node in tree.nodes.values():
        for option in node.options:
            assert option in tree

def test_terminal_nodes_carry_outcomes(tree):
    for node in tree.nodes.values():
        if node.is_terminal and node.id != "initial":
            assert node.outcome_id is not None
            assert node.label is None

@pytest.mark.asyncio
async def test_romanian_citizen_abroad_reaches_outcome_one():
    navigator = await Navigator.create(CachedTreeSource(StaticTreeProvider()))
    options = record(navigator.options)

    navigator.select_option("0")
    navigator.select_option("00")
    assert [n.id for n in options[-1]] == ["000"]
    assert options[-1][0].outcome_id == 1

    navigator.select_option("000")
    node = navigator.tree.tree.get(navigator.snapshot.current_id)
    assert node.is_terminal
    assert node.outcome_id == 1
    assert navigator.view().outcome_id == 1
    assert navigator.view().options == []

@pytest.mark.asyncio
async def test_prompt_reads_as_transcript():
    navigator = await Navigator.create(CachedTreeSource(StaticTreeProvider()))
    prompts = record(navigator.prompt_text)
    navigator.select_option("0")
    navigator.select_option("01")
    assert prompts[-1] == "Ești cetățean român Te vei afla în Romania pe 27 septembrie..."
    navigator.select_option("010")
    navigator.select_option("0100")
    assert prompts[-1] == (
        "Ești cetățean român Te vei afla în Romania pe 27 septembrie "
        "Locuiești la adresa din buletin ..."
    )

@pytest.mark.asyncio
async def test_key_1010_holds_node_with_id_1000():
    # Options point at key "1010"; the node stored there says id "1000", outcome 7.
    navigator = await Navigator.create(CachedTreeSource(StaticTreeProvider()))
    options = record(navigator.options)
    navigator.select_option("1")
    navigator.select_option("10")
    navigator.select_option("100")

    offered = options[-1]
    assert len(offered) == 1
    assert offered[0].id == "1000"
    assert offered[0].outcome_id == 7
    assert [o.id for o in navigator.view().options] == ["1000"]

    # Following the offered id lands on the node keyed "1000", outcome 6
    navigator.select_option(offered[0].id)
    assert navigator.view().outcome_id == 6

    navigator.back()
    navigator.select_option("1010")
    assert navigator.view().outcome_id == 7

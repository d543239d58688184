from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

INITIAL_ID = "initial"


class TreeNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: Optional[str] = None
    options: Tuple[str, ...] = ()
    outcome_id: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("outcome_id", "outcomeId")
    )

    @property
    def is_terminal(self) -> bool:
        return not self.options


class DecisionTree(BaseModel):
    """Immutable questionnaire graph keyed by node id.

    The key a node is stored under is what options refer to; the node's own
    ``id`` field is not required to match it.
    """
    model_config = ConfigDict(frozen=True)

    nodes: Mapping[str, TreeNode]

    @field_validator("nodes", mode="after")
    @classmethod
    def read_only_nodes(cls, nodes: Mapping[str, TreeNode]) -> Mapping[str, TreeNode]:
        return MappingProxyType(dict(nodes))

    @model_validator(mode="after")
    def check_references(self) -> "DecisionTree":
        if INITIAL_ID not in self.nodes:
            raise ValueError(f"Decision tree has no '{INITIAL_ID}' entry")
        for key, node in self.nodes.items():
            for option in node.options:
                if option not in self.nodes:
                    raise ValueError(f"Node '{key}' references unknown option '{option}'")
        return self

    @classmethod
    def from_mapping(cls, data: Dict[str, dict]) -> "DecisionTree":
        return cls(nodes=data)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, node_id: str) -> Optional[TreeNode]:
        return self.nodes.get(node_id)

    def children_of(self, node_id: str) -> List[TreeNode]:
        node = self.nodes.get(node_id)
        if node is None:
            return []
        return [self.nodes[option] for option in node.options]

    def outcomes(self) -> List[int]:
        return sorted({n.outcome_id for n in self.nodes.values() if n.outcome_id is not None})


class TreeOk(BaseModel):
    status: Literal["ok"] = "ok"
    tree: DecisionTree

    @property
    def is_error(self) -> bool:
        return False


class TreeError(BaseModel):
    status: Literal["error"] = "error"
    reason: str

    @property
    def is_error(self) -> bool:
        return True


TreeResult = Union[TreeOk, TreeError]


class NavigationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Tuple[str, ...] = (INITIAL_ID,)

    @field_validator("path")
    @classmethod
    def path_starts_at_initial(cls, path: Tuple[str, ...]) -> Tuple[str, ...]:
        if not path or path[0] != INITIAL_ID:
            raise ValueError(f"Path must start with '{INITIAL_ID}'")
        return path

    @property
    def current_id(self) -> str:
        return self.path[-1]

    @property
    def is_initial(self) -> bool:
        return self.path == (INITIAL_ID,)


class OptionView(BaseModel):
    id: str
    label: Optional[str] = None


class QuestionnaireView(BaseModel):
    prompt: Optional[str] = None
    options: List[OptionView] = []
    is_beyond_start: bool = False
    has_error: bool = False
    outcome_id: Optional[int] = None

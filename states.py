from enum import Enum, IntEnum
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


NUM_STAGES = 4
NUM_RESIDUES = 30


class Stage(IntEnum):
    PRIMARY = 0
    SECONDARY = 1
    TERTIARY = 2
    QUATERNARY = 3


class SecondaryVariant(Enum):
    HELIX = "helix"
    SHEET = "sheet"


class ResidueClass(Enum):
    HYDROPHOBIC = "hydrophobic"
    CYSTEINE = "cysteine"
    ACIDIC = "acidic"
    BASIC = "basic"
    POLAR = "polar"
    NEUTRAL = "neutral"


class SessionStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    FINISHED = "finished"


class TransientNotice(BaseModel):
    """A short message shown to the learner until `expires_at`."""
    model_config = ConfigDict(frozen=True)

    text: str
    expires_at: float

    def is_visible(self, now: float) -> bool:
        return now < self.expires_at


class AnimationTimer(BaseModel):
    """The single pending completion of a folding simulation."""
    model_config = ConfigDict(frozen=True)

    stage: Stage = Field(description="stage that completes when the timer elapses")
    due_at: float = Field(description="clock value at which the animation ends")

    def is_due(self, now: float) -> bool:
        return now >= self.due_at


class StageSimulationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_stage: Stage = Stage.PRIMARY
    is_animating: bool = False
    completed: Tuple[bool, bool, bool, bool] = (False, False, False, False)
    secondary_variant: SecondaryVariant = SecondaryVariant.HELIX
    is_denatured: bool = False
    pending: Optional[AnimationTimer] = None

    def is_completed(self, stage: Stage) -> bool:
        return self.completed[int(stage)]


class PeptideBondState(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: int = Field(default=0, ge=0, le=3, description="0 start, 1 OH selected, 2 H selected, 3 bonded")
    hint: Optional[TransientNotice] = None


class ProteinFunction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: str
    category: str
    description: str


PROTEIN_FUNCTIONS: List[ProteinFunction] = [
    ProteinFunction(id='1', name='Rubisco', role='Catalysis', category='Enzyme',
                    description='Catalyzes the fixation of CO2 from the atmosphere during photosynthesis.'),
    ProteinFunction(id='2', name='Insulin', role='Hormone', category='Signaling',
                    description='A hormone produced by the pancreas that regulates blood glucose levels.'),
    ProteinFunction(id='3', name='Immunoglobulin', role='Immunity', category='Antibody',
                    description='Antibodies that identify and neutralize foreign objects like bacteria and viruses.'),
    ProteinFunction(id='4', name='Rhodopsin', role='Receptor', category='Sensory',
                    description='A pigment in the photoreceptor cells of the retina responsible for vision in low light.'),
    ProteinFunction(id='5', name='Collagen', role='Structure', category='Fibrous',
                    description='Provides tensile strength to skin, tendons, and ligaments. Forms a triple helix.'),
    ProteinFunction(id='6', name='Spider Silk', role='Structure', category='Fibrous',
                    description='A fibrous protein spun by spiders, possessing high tensile strength and extensibility.'),
    ProteinFunction(id='7', name='Hemoglobin', role='Transport', category='Globular',
                    description='Carries oxygen in red blood cells. Consists of 4 polypeptides and heme groups.'),
    ProteinFunction(id='8', name='Actin/Myosin', role='Movement', category='Contractile',
                    description='Proteins responsible for muscle contraction.'),
]


class MatchingGameState(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_protein_id: Optional[str] = None
    matched_ids: FrozenSet[str] = frozenset()
    definition_order: Tuple[str, ...] = Field(description="display order of the descriptions, cosmetic only")
    notice: Optional[TransientNotice] = None


class AminoBuilderState(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_part: Optional[str] = None
    placed: Tuple[Tuple[str, str], ...] = Field(default=(), description="(zone, part) pairs in placement order")
    hint: Optional[TransientNotice] = None

    def part_in(self, zone: str) -> Optional[str]:
        return dict(self.placed).get(zone)


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: int = Field(alias="correctAnswer", ge=0, le=3, description="index of the correct option")
    explanation: str


class QuizSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SessionStatus = SessionStatus.LOADING
    topic: str = "Proteins"
    questions: Tuple[QuizQuestion, ...] = ()
    current_index: int = 0
    selected_option: Optional[int] = None
    score: int = 0

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.status is not SessionStatus.READY:
            return None
        return self.questions[self.current_index]

    @property
    def show_explanation(self) -> bool:
        return self.selected_option is not None

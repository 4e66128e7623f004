from .errors import AlignmentError, DeadEndError, ReservedTagError, ModelNotTrainedError, TableSpentError, TaggerError
from .estimator import ParameterEstimator, train
from .hmm import HiddenMarkovModel
from .tables import CountTable, ProbabilityTable
from .viterbi import Viterbi, decode

__version__ = '0.1.0'

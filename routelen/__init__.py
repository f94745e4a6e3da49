from .errors import RouteLenError, IndexOutOfRange, InvalidDimensions
from .dense_matrix import DenseMatrix
from .edges import Traversal, iter_edges, edge_map, edge_reduce
from .location import Locatable, Location, euclidean
from .distance_matrix import DistanceMatrix
from .instance import RouteInstance
from .experiments import ExperimentConfig, sample_route_lengths, run_size_sweep, best_route

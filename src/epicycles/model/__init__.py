from epicycles.model.chain import ChainGeometry, ChainSegment, Point, evaluate_chain
from epicycles.model.cursor import TimeCursor, TimeDirection
from epicycles.model.decomposition import (
    DecompositionWindow, RowLabel, component_scale, compute_window, result_label, row_labels, summed_scale,
)
from epicycles.model.parameters import SeriesParameters, ViewMode
from epicycles.model.series import (
    FunctionFamily, SeriesFamily, Term, dc_offset, generate_terms, get_family, list_families, partial_sum,
)
from epicycles.model.trace import TraceBuffer

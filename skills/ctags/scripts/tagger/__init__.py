from .classify import (
    C_LIKE,
    DEFINE_MARKER,
    FORTRAN,
    FUNCTION_MARKER,
    TYPEDEF_MARKER,
    ScanState,
    c_category,
    classify_c_line,
    classify_fortran_line,
    classify_line,
    fortran_category,
)
from .core import DEFAULT_TAGSFILE, TagOptions, Tagger, run_tags
from .emit import listing_record, tag_table_record, write_listing, write_tag_table
from .errors import (
    AllocationFailure,
    FileOpenError,
    NoInputFiles,
    OutputOpenError,
    TagsError,
    UnknownExtension,
    UnsupportedExtension,
)
from .scanner import SOURCE_TYPES, iter_source_lines, scan_file, scan_lines, source_type_for_path
from .store import Tag, TagStore, codepoint_compare

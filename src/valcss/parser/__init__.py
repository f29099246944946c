from valcss.parser.classname import (
    ClassParts,
    base_segment,
    parse_class_string,
    split_class_token,
)

__all__ = ["ClassParts", "base_segment", "parse_class_string", "split_class_token"]

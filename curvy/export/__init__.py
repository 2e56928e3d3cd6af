from curvy.export.svg import path_data, to_document, to_string, viewbox_for, write_svg

__all__ = ["path_data", "viewbox_for", "to_document", "to_string", "write_svg"]

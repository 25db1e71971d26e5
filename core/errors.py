"""
Exception hierarchy for document assembly.

Validation never raises: validators return a dict of field messages.
Everything below signals a fatal failure while building or merging a
document, so callers can tell "show error" from "show field errors".
"""


class FinancialFormsError(Exception):
    """Base exception"""
    pass


class DocumentAssemblyError(FinancialFormsError):
    """Building or serialising the claim document failed"""
    pass


class UnsupportedFormTypeError(DocumentAssemblyError):
    """No builder is registered for the requested formType"""
    pass


class AttachmentError(DocumentAssemblyError):
    """An attachment could not be loaded, decoded or appended"""
    pass

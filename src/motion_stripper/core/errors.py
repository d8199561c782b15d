"""
Exceptions raised by the rewriter.
"""


class FileAccessError(OSError):
  """
  Raised when the target file or a requested config file cannot be used.
  """

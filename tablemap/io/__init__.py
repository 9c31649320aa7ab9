# tablemap/io/__init__.py
#
# Text and JSON codecs layered on top of the table types.

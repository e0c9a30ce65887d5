"""Infrastructure: digest providers and wire codecs."""

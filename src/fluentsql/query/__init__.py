"""Statement builders and the compiler that renders them."""

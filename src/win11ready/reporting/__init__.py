"""Console, JSON, JUnit and HTML renderings of an evaluation result."""

"""Console arithmetic quiz: questions, timed answers and a session history."""

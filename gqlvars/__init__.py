""" An online parser for GraphQL variables, for editor highlighting and indentation. """

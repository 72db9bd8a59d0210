"""
Cinema catalog bounded context

Static data the projection context reads: rooms with their seat layout,
and movies.
"""

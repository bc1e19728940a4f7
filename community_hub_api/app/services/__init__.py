"""
Service layer.

``MatchingService`` scores and ranks members, ``MemberService`` serves
the member directory queries and ``HotseatService`` coordinates
hotseat sessions.  Services return plain values or ``Failure`` objects;
they know nothing about HTTP.
"""

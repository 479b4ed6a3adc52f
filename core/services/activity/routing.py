"""
URL generation for activity extensions.
"""

from typing import Mapping, Optional
from urllib.parse import urlencode

from django.urls import reverse


class URLGenerator:
    """Builds links to named routes."""

    def link_to_route(self, route_name: str, params: Optional[Mapping[str, object]] = None) -> str:
        """
        Build the URL of a named route with query parameters.
        
        Args:
            route_name: Django URL name (e.g. 'activity-list')
            params: Query parameters appended to the path
            
        Returns:
            The relative URL
            
        Raises:
            NoReverseMatch: If the route is not known
            
        Example:
            >>> URLGenerator().link_to_route('activity-list', {'filter': 'calendar'})
            '/activity/?filter=calendar'
        """
        url = reverse(route_name)
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

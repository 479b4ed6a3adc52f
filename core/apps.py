import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    
    def ready(self):
        """Register the configured activity extensions when the app is ready."""
        from core.services import config
        from core.services.activity.manager import load_configured_extensions
        
        if not config.is_activity_enabled():
            logger.info("Activity stream disabled, no extensions registered")
            return
        
        load_configured_extensions(config.load_extension_factories())

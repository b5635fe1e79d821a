import logging

logger = logging.getLogger('htmlrender')

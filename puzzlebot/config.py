import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Bot configuration settings"""
    
    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated, empty for global sync
    
    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///puzzles.db')
    
    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    
    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if not cls.DISCORD_GUILD_IDS:
            # Global sync
            return []
        try:
            return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
        except ValueError:
            raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
    
    @classmethod
    def get_async_database_url(cls, database_url: str = None) -> str:
        """Rewrite a plain database URL to use an async driver"""
        database_url = database_url or cls.DATABASE_URL
        if database_url.startswith('sqlite:///'):
            return database_url.replace('sqlite:///', 'sqlite+aiosqlite:///', 1)
        if database_url.startswith('postgresql://'):
            return database_url.replace('postgresql://', 'postgresql+asyncpg://', 1)
        if database_url.startswith('postgres://'):
            return database_url.replace('postgres://', 'postgresql+asyncpg://', 1)
        return database_url
    
    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        cls.get_guild_ids()

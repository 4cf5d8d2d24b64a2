from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "plp_bookstore"
    mongodb_collection: str = "books"

    model_config = {"env_file": ".env"}


settings = Settings()

from httpx import Client

from httpcall._config import Config
from httpcall._services._base_service import BaseService


class TestBaseService:
    def test_init_base_service(self, config: Config):
        service = BaseService(config=config)

        assert service is not None
        assert isinstance(service._client, Client)
        service.close()

    def test_owned_client_is_closed(self, config: Config):
        with BaseService(config=config) as service:
            client = service._client

        assert client.is_closed

    def test_injected_client_is_not_closed(self, config: Config):
        with Client() as client:
            with BaseService(config=config, client=client) as service:
                assert service._client is client

            assert not client.is_closed

"""Tests for base controller module."""

from __future__ import annotations

import pytest

from kubetopo.controllers.base.base_controller import BaseController, WorkerResult


class TestWorkerResult:
    """Tests for WorkerResult dataclass."""

    def test_worker_result_success(self) -> None:
        """Test successful worker result."""
        result = WorkerResult(success=True, data={"records": []}, duration_ms=100.0)
        assert result.success is True
        assert result.data == {"records": []}
        assert result.error is None

    def test_worker_result_defaults(self) -> None:
        """Test WorkerResult default values."""
        result = WorkerResult(success=False)
        assert result.data is None
        assert result.error is None
        assert result.duration_ms == 0.0


class TestBaseController:
    """Tests for BaseController abstract class."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()

    @pytest.mark.asyncio
    async def test_concrete_controller(self) -> None:
        """Test a subclass implementing both methods can be used."""

        class ConcreteController(BaseController):
            async def check_connection(self) -> bool:
                return True

            async def fetch_all(self) -> dict:
                return {"data": []}

        controller = ConcreteController()
        assert await controller.check_connection() is True
        assert await controller.fetch_all() == {"data": []}

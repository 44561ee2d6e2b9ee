"""이슈 API 테스트.

Issue API tests.
Tests creation, listing, one-way resolution, validation and error bodies.
"""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import ISSUES_URL, create_issue, issue_payload


class TestIssueCreate:
    """이슈 생성 테스트."""

    async def test_create_issue(self, client: AsyncClient):
        """생성 시 businessId 발급, 상태는 new."""
        res = await client.post(ISSUES_URL, json=issue_payload())
        assert res.status_code == 201
        data = res.json()
        assert data["businessId"]
        assert data["assignee"] == "Alice"
        assert data["severity"] == "High"
        assert data["status"] == "new"
        assert data["createdAt"] and data["updatedAt"]

    async def test_create_forces_new_status(self, client: AsyncClient):
        """요청의 status 값은 무시됨."""
        res = await client.post(ISSUES_URL, json=issue_payload(status="resolved"))
        assert res.status_code == 201
        assert res.json()["status"] == "new"

    async def test_create_accepts_name_key(self, client: AsyncClient):
        """대시보드 클라이언트 호환 — name 키로 담당자 전달."""
        payload = issue_payload()
        payload["name"] = payload.pop("assignee")
        res = await client.post(ISSUES_URL, json=payload)
        assert res.status_code == 201
        assert res.json()["assignee"] == "Alice"

    async def test_business_ids_are_unique(self, client: AsyncClient):
        first = await create_issue(client)
        second = await create_issue(client)
        assert first["businessId"] != second["businessId"]

    async def test_storage_id_not_exposed(self, client: AsyncClient):
        data = await create_issue(client)
        assert "id" not in data


class TestIssueValidation:
    """이슈 생성 검증 테스트 — 모두 400 {message}."""

    async def test_missing_title(self, client: AsyncClient):
        payload = issue_payload()
        del payload["title"]
        res = await client.post(ISSUES_URL, json=payload)
        assert res.status_code == 400
        assert "title" in res.json()["message"]

    async def test_empty_description(self, client: AsyncClient):
        res = await client.post(ISSUES_URL, json=issue_payload(description=""))
        assert res.status_code == 400
        assert "description" in res.json()["message"]

    async def test_invalid_severity(self, client: AsyncClient):
        res = await client.post(ISSUES_URL, json=issue_payload(severity="Critical"))
        assert res.status_code == 400
        assert "severity" in res.json()["message"]

    async def test_missing_assignee(self, client: AsyncClient):
        payload = issue_payload()
        del payload["assignee"]
        res = await client.post(ISSUES_URL, json=payload)
        assert res.status_code == 400
        assert set(res.json()) == {"message"}


class TestIssueList:
    """이슈 목록 조회 테스트."""

    async def test_list_empty(self, client: AsyncClient):
        res = await client.get(ISSUES_URL)
        assert res.status_code == 200
        assert res.json() == []

    async def test_created_issue_listed_once(self, client: AsyncClient):
        """생성 후 목록에 정확히 한 번, 상태 new로 포함."""
        created = await create_issue(client)
        await create_issue(client, assignee="Bob")

        res = await client.get(ISSUES_URL)
        assert res.status_code == 200
        matches = [i for i in res.json() if i["businessId"] == created["businessId"]]
        assert len(matches) == 1
        assert matches[0]["status"] == "new"
        assert len(res.json()) == 2


class TestIssueResolve:
    """이슈 해결 처리 테스트."""

    async def test_resolve_issue(self, client: AsyncClient):
        created = await create_issue(client)
        res = await client.put(f"{ISSUES_URL}/{created['businessId']}", json={"status": "resolved"})
        assert res.status_code == 200
        data = res.json()
        assert data["businessId"] == created["businessId"]
        assert data["status"] == "resolved"

    async def test_resolve_ignores_body(self, client: AsyncClient):
        """본문 없이 또는 다른 status를 보내도 resolved."""
        created = await create_issue(client)
        res = await client.put(f"{ISSUES_URL}/{created['businessId']}", json={"status": "new"})
        assert res.status_code == 200
        assert res.json()["status"] == "resolved"

        other = await create_issue(client)
        res = await client.put(f"{ISSUES_URL}/{other['businessId']}")
        assert res.status_code == 200
        assert res.json()["status"] == "resolved"

    async def test_resolve_twice_is_idempotent(self, client: AsyncClient):
        created = await create_issue(client)
        url = f"{ISSUES_URL}/{created['businessId']}"

        first = await client.put(url)
        second = await client.put(url)
        assert first.status_code == second.status_code == 200
        assert second.json()["status"] == "resolved"
        # 이미 해결된 이슈는 수정 시각도 그대로
        assert second.json()["updatedAt"] == first.json()["updatedAt"]

        listed = (await client.get(ISSUES_URL)).json()
        assert [i["status"] for i in listed] == ["resolved"]

    async def test_resolve_unknown_issue(self, client: AsyncClient):
        """존재하지 않는 businessId는 매번 404."""
        for _ in range(2):
            res = await client.put(f"{ISSUES_URL}/does-not-exist")
            assert res.status_code == 404
            assert res.json() == {"message": "Issue not found"}

    async def test_resolve_accepts_any_body(self, client: AsyncClient):
        """본문은 검증하지 않음 — 문자열이 아닌 status, 배열 본문도 resolved."""
        created = await create_issue(client)
        res = await client.put(f"{ISSUES_URL}/{created['businessId']}", json={"status": True})
        assert res.status_code == 200
        assert res.json()["status"] == "resolved"

        other = await create_issue(client)
        res = await client.put(f"{ISSUES_URL}/{other['businessId']}", json=["resolved"])
        assert res.status_code == 200
        assert res.json()["status"] == "resolved"


class TestIssueCommitFailure:
    """커밋 단계의 저장소 오류도 StoreUnavailableError로 변환."""

    @staticmethod
    def _fail_commit(db: AsyncSession, monkeypatch) -> None:
        async def _commit():
            raise OperationalError("COMMIT", {}, Exception("connection reset"))

        monkeypatch.setattr(db, "commit", _commit)

    async def test_create_commit_failure(self, client: AsyncClient, db: AsyncSession, monkeypatch):
        self._fail_commit(db, monkeypatch)
        res = await client.post(ISSUES_URL, json=issue_payload())
        assert res.status_code == 500
        assert res.json()["message"].startswith("Could not save changes")

    async def test_resolve_commit_failure(self, client: AsyncClient, db: AsyncSession, monkeypatch):
        created = await create_issue(client)
        self._fail_commit(db, monkeypatch)
        res = await client.put(f"{ISSUES_URL}/{created['businessId']}")
        assert res.status_code == 500
        assert res.json()["message"].startswith("Could not save changes")

"""
书籍管理端到端测试
测试完整的书籍管理工作流程
"""
import pytest

from library_api.utils.validators import is_valid_isbn


@pytest.mark.e2e
class TestBookManagementFlow:
    """书籍管理端到端测试类"""

    def test_complete_book_lifecycle(self, client, book_factory):
        """测试完整的书籍生命周期"""
        # 1. 创建书籍
        book_data = book_factory(title="The Dirty Coder")
        isbn = book_data["isbn"]

        create_response = client.post("/books", json=book_data)
        assert create_response.status_code == 201
        assert create_response.headers["location"] == f"/books/{isbn}"

        # 2. 验证书籍创建成功
        get_response = client.get(f"/books/{isbn}")
        assert get_response.status_code == 200
        assert get_response.json() == book_data

        # 3. 搜索书籍
        search_response = client.get("/books", params={"searchTerm": "Dirty"})
        assert [b["isbn"] for b in search_response.json()] == [isbn]

        # 4. 更新书籍信息
        update_data = {**book_data, "title": "The Dirty Coder, Revised", "author": "D. Mendoza"}
        update_response = client.put(f"/books/{isbn}", json=update_data)
        assert update_response.status_code == 200

        # 5. 验证书籍更新成功
        updated_book = client.get(f"/books/{isbn}").json()
        assert updated_book["title"] == "The Dirty Coder, Revised"
        assert updated_book["author"] == "D. Mendoza"

        # 6. 重复创建被拒绝，记录保持不变
        duplicate_response = client.post("/books", json=book_data)
        assert duplicate_response.status_code == 400
        assert client.get(f"/books/{isbn}").json()["title"] == "The Dirty Coder, Revised"

        # 7. 删除书籍
        delete_response = client.delete(f"/books/{isbn}")
        assert delete_response.status_code == 204

        # 8. 验证书籍已删除
        assert client.get(f"/books/{isbn}").status_code == 404
        assert client.get("/books").json() == []
        assert client.put(f"/books/{isbn}", json=update_data).status_code == 404
        assert client.delete(f"/books/{isbn}").status_code == 404

    def test_generated_isbns_are_valid_and_unique(self, isbn_generator):
        """测试生成的ISBN格式合法且不重复"""
        generated = [isbn_generator() for _ in range(20)]

        assert all(is_valid_isbn(isbn) for isbn in generated)
        assert len(set(generated)) == len(generated)

"""렌더링 완료 HTML 스냅샷 자산"""

PAGES = {
    # 두 번째 카드는 가격이 없음
    "acme_two_cards": """
        <html><body>
          <div class="card">
            <span class="t">  Cordless Drill 18V  </span>
            <span class="p">$99.00</span>
            <img src="data:image/gif;base64,R0lGODlhAQABAAAAACw=" data-src="https://cdn.acme.test/drill.jpg">
            <a href="/product/42">view</a>
          </div>
          <div class="card">
            <span class="t">Drill Bit Set</span>
            <img src="https://cdn.acme.test/bits.jpg">
            <a href="/p7X42AB">view</a>
          </div>
        </body></html>
    """,
    "acme_branded": """
        <html><body>
          <div class="card">
            <span class="t">Hammer Drill</span>
            <span class="p">$149.00</span>
            <span class="b">Makita</span>
            <span class="r">4.7</span>
            <img src="https://cdn.acme.test/hammer.jpg">
            <a href="https://acme.test/p9HD100">view</a>
          </div>
          <div class="card">
            <span class="t">Impact Driver</span>
            <span class="p">$89.00</span>
            <a href="/shop/item">view</a>
          </div>
        </body></html>
    """,
    "acme_empty": """
        <html><body><div class="no-results">Nothing found</div></body></html>
    """,
    "product_detail": """
        <html><body>
          <h1 class="title"> Cordless Drill 18V </h1>
          <div class="price">$99.00</div>
          <div class="description">
            Compact drill with two batteries.
          </div>
          <span class="brand">Makita</span>
          <span class="rating">4.8</span>
          <span class="stock">In stock</span>
          <img class="gallery" src="https://cdn.acme.test/d1.jpg">
          <img class="gallery" src="/images/d2.jpg">
          <img class="gallery" data-src="https://cdn.acme.test/d3.jpg">
          <img class="gallery">
          <img class="logo" src="/logo.png">
        </body></html>
    """,
}

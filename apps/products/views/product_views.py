"""
Shop product list and detail views.
"""
from django.db.models import Q
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from apps.common.utils import success_response, error_response, paginate_queryset
from ..models import Product, ProductCategory
from ..serializers import ProductCategorySerializer, ProductListSerializer, ProductDetailSerializer


class ProductListView(APIView):
    """Product list endpoint - GET /api/shop/products/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        products = Product.objects.active().select_related('category')

        category = request.GET.get('category', '').strip()
        if category:
            if category.isdigit():
                products = products.filter(category_id=int(category))
            else:
                products = products.filter(category__slug=category)

        search = request.GET.get('search', '').strip()
        if search:
            products = products.filter(Q(name__icontains=search) | Q(description__icontains=search))

        items, pagination = paginate_queryset(products, request)
        serializer = ProductListSerializer(items, many=True, context={'request': request})
        return success_response({
            'products': serializer.data,
            'pagination': pagination,
        })


class ProductDetailView(APIView):
    """Product detail endpoint - GET /api/shop/products/{id}/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, pk):
        product = Product.objects.active().select_related('category').filter(pk=pk).first()
        if product is None:
            return error_response('Product not found', status_code=status.HTTP_404_NOT_FOUND)

        serializer = ProductDetailSerializer(product, context={'request': request})
        return success_response(serializer.data)


class CategoryListView(APIView):
    """Category list endpoint - GET /api/shop/categories/"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        categories = ProductCategory.objects.all()
        return success_response(ProductCategorySerializer(categories, many=True).data)

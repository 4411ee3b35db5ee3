from django.urls import path, include
from rest_framework.routers import DefaultRouter

from apps.purchases.api.v1.views import PurchaseTransactionViewSet

router = DefaultRouter()
router.register(r'transactions', PurchaseTransactionViewSet, basename='transaction')

urlpatterns = [
    path('', include(router.urls)),
]
